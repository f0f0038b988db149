from __future__ import annotations

import logging

from flask import Flask, jsonify

from ..core.exceptions import NotFoundError, StoreUnavailableError, ValidationError

logger = logging.getLogger(__name__)


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(ValidationError)
    def _validation(e: ValidationError):
        return jsonify({"success": False, "message": str(e)}), 400

    @app.errorhandler(NotFoundError)
    def _not_found(e: NotFoundError):
        return jsonify({"success": False, "message": str(e)}), 404

    @app.errorhandler(StoreUnavailableError)
    def _store_unavailable(e: StoreUnavailableError):
        logger.warning("store unavailable: %s", e)
        return jsonify({"success": False, "message": "Banco de dados indisponível, tente novamente"}), 503
