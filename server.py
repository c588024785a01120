from urllib.parse import urlparse

from dotenv import load_dotenv
from flask import Flask, jsonify, render_template, request

from config import Settings
from errors import (
    AdOptimizerError,
    ConfigError,
    NetworkError,
    ParseError,
    SchemaError,
    ValidationError,
)
from optimizer import AdOptimizer

load_dotenv()

app = Flask(__name__)
app.config["MAX_CONTENT_LENGTH"] = 64 * 1024  # 64KB

ERROR_STATUS = {
    ValidationError: 400,
    ConfigError: 500,
    NetworkError: 502,
    ParseError: 502,
    SchemaError: 502,
}


@app.errorhandler(413)
def request_entity_too_large(e):
    return jsonify({"error": "A requisição é grande demais."}), 413


def validate_product_url(raw_url) -> str:
    url = raw_url.strip() if isinstance(raw_url, str) else ""
    if not url:
        raise ValidationError("Por favor, insira a URL do produto.")
    parsed = urlparse(url)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise ValidationError()
    return url


def _status_for(error: AdOptimizerError) -> int:
    for error_type, status in ERROR_STATUS.items():
        if isinstance(error, error_type):
            return status
    return 500


# ── Routes ──
@app.route("/")
def index():
    return render_template("index.html")


@app.route("/optimize", methods=["POST"])
def optimize():
    payload = request.get_json(silent=True)
    if isinstance(payload, dict):
        raw_url = payload.get("url")
    else:
        raw_url = request.form.get("url")

    try:
        product_url = validate_product_url(raw_url)
        # 요청마다 환경변수를 다시 읽음
        optimizer = AdOptimizer(Settings.from_env())
        result = optimizer.optimize(product_url)
        return jsonify(result.model_dump(by_alias=True, mode="json"))
    except AdOptimizerError as e:
        app.logger.warning(f"최적화 실패 ({type(e).__name__}): {e}")
        return jsonify({"error": e.user_message}), _status_for(e)
    except Exception:
        app.logger.exception("최적화 중 예기치 않은 오류")
        return jsonify({"error": AdOptimizerError.default_message}), 500


if __name__ == "__main__":
    app.run(debug=True, port=5000)
