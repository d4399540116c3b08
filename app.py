import logging
import os

from dotenv import load_dotenv
from flask import Flask, jsonify, render_template, request
from markupsafe import Markup

from caesar_tools.breakers import caesar_break, decode_all
from caesar_tools.caesar import decode, encode
from caesar_tools.errors import InvalidKeyError
from caesar_tools.frequency_analyser import analyse

load_dotenv()

# ----- Configuration -----
app = Flask(__name__)

app.config["MAX_CONTENT_LENGTH"] = int(os.environ.get("CESAR_MAX_TEXT_LENGTH", 1024 * 1024))

LOG_LEVEL = os.environ.get("CESAR_LOG_LEVEL", "INFO").upper()
app.logger.setLevel(LOG_LEVEL)
logging.getLogger("werkzeug").setLevel(LOG_LEVEL)


class BadRequest(ValueError):
    pass


def read_payload():
    """JSON object of the request, with `text` checked to be a string."""
    data = request.get_json(force=True, silent=True)
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise BadRequest("Le corps de la requête doit être un objet JSON.")
    text = data.get("text")
    if text is None:
        text = ""
    if not isinstance(text, str):
        raise BadRequest("Le message doit être une chaîne de caractères.")
    return data, text


def parse_key(raw):
    """Key from the form: a JSON int or a decimal string. None if unusable."""
    if isinstance(raw, str):
        try:
            return int(raw.strip(), 10)
        except ValueError:
            return None
    return raw


@app.errorhandler(BadRequest)
def bad_request(e):
    app.logger.warning("Rejected %s: %s", request.path, e)
    return jsonify({"error": str(e)}), 400


# ------------------- Page -------------------
@app.route("/", methods=["GET"])
def index():
    return render_template("index.html")


# ==============================
#  ENCODER / DECODER API ROUTES
# ==============================
@app.route("/api/encode", methods=["POST"])
def api_encode():
    data, text = read_payload()
    key = parse_key(data.get("key"))

    try:
        result = encode(text, key)
    except InvalidKeyError as e:
        app.logger.warning("Encode rejected key %r", data.get("key"))
        return jsonify({"error": str(e)}), 400

    app.logger.debug("Encoded %d chars with key %s", len(text), key)
    return jsonify({"result": result})


@app.route("/api/decode", methods=["POST"])
def api_decode():
    data, text = read_payload()
    raw_key = data.get("key")
    if isinstance(raw_key, str):
        raw_key = raw_key.strip()

    # known key: plain decryption
    if raw_key not in (None, ""):
        key = parse_key(raw_key)
        try:
            result = decode(text, key)
        except InvalidKeyError as e:
            app.logger.warning("Decode rejected key %r", data.get("key"))
            return jsonify({"error": str(e)}), 400
        return jsonify({"result": result})

    candidates = decode_all(text)
    app.logger.debug("Brute-forced %d chars, best key %s", len(text), candidates[0].key)
    return jsonify({
        "candidates": [c._asdict() for c in candidates],
        "display": str(Markup("<br>").join(c.text for c in candidates)),
    })


# ------------------- Letter statistics -------------------
@app.route("/api/analyse", methods=["POST"])
def api_analyse():
    _data, text = read_payload()
    stats = analyse(text)
    key, plaintext = caesar_break(text)
    return jsonify({
        "letters": stats["letters"],
        "frequencies": [[letter, count] for letter, count in stats["frequencies"]],
        "score": stats["score"],
        "best": {"key": key, "text": plaintext},
    })


if __name__ == "__main__":
    app.run(debug=os.environ.get("CESAR_DEBUG", "").lower() in ("1", "true"))
