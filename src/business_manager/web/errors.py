from __future__ import annotations

import mysql.connector
from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException, RequestEntityTooLarge

from ..core.exceptions import DomainError

GENERIC_ERROR = "حدث خطأ في الخادم"

_HTTP_MESSAGES = {
    404: "المورد غير موجود",
    405: "الطريقة غير مسموحة",
    413: "حجم الملف أكبر من الحد المسموح (10 ميغابايت)",
}


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(DomainError)
    def handle_domain_error(err: DomainError):
        if err.status_code >= 500:
            app.logger.error("%s: %s", type(err).__name__, err)
            return jsonify({"message": GENERIC_ERROR}), err.status_code
        return jsonify({"message": str(err)}), err.status_code

    @app.errorhandler(RequestEntityTooLarge)
    def handle_too_large(err: RequestEntityTooLarge):
        return jsonify({"message": _HTTP_MESSAGES[413]}), 413

    @app.errorhandler(HTTPException)
    def handle_http_error(err: HTTPException):
        message = _HTTP_MESSAGES.get(err.code or 500, err.description or GENERIC_ERROR)
        return jsonify({"message": message}), err.code or 500

    @app.errorhandler(mysql.connector.Error)
    def handle_db_error(err: mysql.connector.Error):
        app.logger.exception("Database error")
        return jsonify({"message": GENERIC_ERROR}), 500

    @app.errorhandler(Exception)
    def handle_unexpected(err: Exception):
        app.logger.exception("Unhandled error")
        return jsonify({"message": GENERIC_ERROR}), 500
