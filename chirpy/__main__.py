# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import sys

from pydantic import ValidationError


def main() -> None:
    from chirpy.shared.config import load_config

    try:
        config = load_config()
    except ValidationError as exc:
        print(f"\n❌ Invalid configuration, refusing to start:\n{exc}\n", file=sys.stderr)
        sys.exit(1)

    from chirpy.app import create_app

    app = create_app()
    app.run(host=config.host, port=config.port, threaded=True)


if __name__ == "__main__":
    main()
