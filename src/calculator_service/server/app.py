"""Flask application exposing the calculator engine and a health probe."""
from typing import Optional, Tuple

from flask import Flask, Response, jsonify, request
from pydantic import BaseModel, ValidationError
from werkzeug.exceptions import HTTPException

from calculator_service.common.calculator import CalculatorError, calculate
from calculator_service.common.logger import logger
from calculator_service.common.operations import (
    ChainRequest,
    ErrorResponse,
    ExpressionRequest,
    ExpressionResult,
    HealthStatus,
    OperationKind,
    OperationRequest,
)
from calculator_service.common.parser import ExpressionParser
from calculator_service.common.session import run_chain
from calculator_service.server.settings import ServiceSettings

HEALTH_STATUS = HealthStatus()

# Matches the four operation tags only
OPERATION_RULE = f"/api/<any({', '.join(kind.value for kind in OperationKind)}):operation>"

# Headers of a Werkzeug error response that describe its HTML body
BODY_HEADERS = {"content-type", "content-length"}


def _error(code: str, message: str, status: int) -> Tuple[Response, int]:
    """Render an ErrorResponse with the given HTTP status."""
    return jsonify(ErrorResponse(error=code, message=message).model_dump()), status


def _ok(model: BaseModel) -> Tuple[Response, int]:
    return jsonify(model.model_dump()), 200


def _json_body() -> dict:
    """Return the JSON object of the request, or raise ValueError."""
    body = request.get_json(silent=True)
    if not isinstance(body, dict):
        raise ValueError("Request body must be a JSON object")
    return body


def create_app(settings: Optional[ServiceSettings] = None) -> Flask:
    """
    Build the Flask application.

    Routes:
        - GET  /health               liveness probe, always {"status": "ok"}
        - GET  /api/<operation>      operands from the query string (?a=&b=)
        - POST /api/<operation>      operands from a JSON body {"a": .., "b": ..}
        - POST /api/evaluate         {"expression": "3 + 4 * 2"}
        - POST /api/chain            {"start": 1, "steps": [{"operation": "add", "operand": 2}]}

    :param ServiceSettings settings: Service settings, defaults when omitted

    :return: Configured application
    :rtype: Flask
    """
    app = Flask(__name__)
    app.config["SERVICE_SETTINGS"] = settings or ServiceSettings()
    # Keep the {"status": "ok"} key order stable
    app.json.sort_keys = False

    @app.get("/health")
    def health():
        return jsonify(HEALTH_STATUS.model_dump()), 200

    @app.post("/api/evaluate")
    def evaluate():
        payload = ExpressionRequest.model_validate(_json_body())
        result = ExpressionParser.evaluate(payload.expression)
        logger.info(f"🧮 {payload.expression} = {result}")
        return _ok(ExpressionResult(expression=payload.expression, result=result))

    @app.post("/api/chain")
    def chain():
        payload = ChainRequest.model_validate(_json_body())
        result = run_chain(payload)
        logger.info(f"🧮 Chain of {len(payload.steps)} steps = {result.result}")
        return _ok(result)

    @app.route(OPERATION_RULE, methods=["GET", "POST"])
    def operate(operation: str):
        if request.method == "GET":
            operands = {"a": request.args.get("a"), "b": request.args.get("b")}
        else:
            body = _json_body()
            operands = {"a": body.get("a"), "b": body.get("b")}
        payload = OperationRequest.model_validate({"operation": operation, **operands})
        result = calculate(payload)
        logger.info(f"🧮 {operation}({payload.a}, {payload.b}) = {result.result}")
        return _ok(result)

    @app.errorhandler(CalculatorError)
    def handle_calculator_error(exc: CalculatorError):
        logger.warning(f"🧮❌ {exc}")
        return _error(exc.code, str(exc), 400)

    @app.errorhandler(ValidationError)
    def handle_validation_error(exc: ValidationError):
        message = "; ".join(
            f"{'.'.join(str(p) for p in err['loc']) or 'body'}: {err['msg']}" for err in exc.errors()
        )
        logger.warning(f"📄❌ Invalid request: {message}")
        return _error("InvalidRequest", message, 400)

    @app.errorhandler(ValueError)
    def handle_value_error(exc: ValueError):
        logger.warning(f"📄❌ Invalid request: {exc}")
        return _error("InvalidRequest", str(exc), 400)

    @app.errorhandler(HTTPException)
    def handle_http_error(exc: HTTPException):
        code = "".join(word.capitalize() for word in (exc.name or "Error").split())
        response, status = _error(code, exc.description or "", exc.code or 500)
        # Keep headers such as Allow on 405
        for key, value in exc.get_response().headers.items():
            if key.lower() not in BODY_HEADERS:
                response.headers[key] = value
        return response, status

    return app


def run(settings: ServiceSettings) -> None:
    """
    Serve the application until interrupted.

    :param ServiceSettings settings: Interface, port and log level to use
    """
    app = create_app(settings)
    logger.info(f"🖥️ Starting calculator service on {settings.host}:{settings.port}")
    app.run(host=str(settings.host), port=settings.port)
