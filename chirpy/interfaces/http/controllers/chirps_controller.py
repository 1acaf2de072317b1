# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from flask import Blueprint, Response, jsonify, request

from chirpy.application.use_cases.chirps.create_chirp import CreateChirpUseCase
from chirpy.application.use_cases.chirps.get_chirp import GetChirpUseCase
from chirpy.application.use_cases.chirps.list_chirps import ListChirpsUseCase
from chirpy.application.use_cases.chirps.moderate_chirp import ModerateChirpUseCase
from chirpy.interfaces.http.dto.chirps import (
    ChirpDTO,
    CleanedChirpDTO,
    CreateChirpRequestDTO,
    ValidateChirpRequestDTO,
)
from chirpy.shared.errors.validation import parse_payload


class ChirpsController:
    def __init__(
        self,
        *,
        create_chirp: CreateChirpUseCase,
        list_chirps: ListChirpsUseCase,
        get_chirp: GetChirpUseCase,
        moderate_chirp: ModerateChirpUseCase,
    ) -> None:
        self._create_chirp = create_chirp
        self._list_chirps = list_chirps
        self._get_chirp = get_chirp
        self._moderate_chirp = moderate_chirp

    def create(self) -> tuple[Response, HTTPStatus]:
        dto = parse_payload(CreateChirpRequestDTO, request.get_json(force=True, silent=True))
        chirp = self._create_chirp.execute(dto.body, dto.user_id)
        return jsonify(ChirpDTO.from_entity(chirp).model_dump(mode="json")), HTTPStatus.CREATED

    def list(self) -> tuple[Response, HTTPStatus]:
        chirps = self._list_chirps.execute()
        payload = [ChirpDTO.from_entity(chirp).model_dump(mode="json") for chirp in chirps]
        return jsonify(payload), HTTPStatus.OK

    def get(self, chirp_id: str) -> tuple[Response, HTTPStatus]:
        chirp = self._get_chirp.execute(chirp_id)
        return jsonify(ChirpDTO.from_entity(chirp).model_dump(mode="json")), HTTPStatus.OK

    def validate(self) -> tuple[Response, HTTPStatus]:
        dto = parse_payload(ValidateChirpRequestDTO, request.get_json(force=True, silent=True))
        cleaned = self._moderate_chirp.execute(dto.body)
        return jsonify(CleanedChirpDTO(cleaned_body=cleaned).model_dump()), HTTPStatus.OK

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("chirps", __name__, url_prefix="/api")
        bp.add_url_rule("/chirps", view_func=self.create, methods=["POST"])
        bp.add_url_rule("/chirps", view_func=self.list, methods=["GET"])
        bp.add_url_rule("/chirps/<chirp_id>", view_func=self.get, methods=["GET"])
        bp.add_url_rule("/validate_chirp", view_func=self.validate, methods=["POST"])
        return bp
