from dotenv import load_dotenv
load_dotenv()
from flask import Flask, request, jsonify
import logging
import math
import os

from cipher_tools.caesar import (
    CaesarError,
    NonAsciiError,
    PlaintextInvalidError,
    caesar_break,
    caesar_decode,
    caesar_encode,
)
from cipher_tools.frequency_analyser import (
    ENGLISH_FREQ_TABLE,
    load_frequency_table,
    rank_shifts,
)
from cipher_tools.auto_break import (
    DEFAULT_THRESHOLD as ENGINE_DEFAULT_THRESHOLD,
    decrypt_auto_crib,
    decrypt_auto_english,
    initialize_lexicon,
)

# ----- Configuration -----
WORDLIST_PATH = os.environ.get("CAESAR_WORDLIST_PATH") or None
FREQ_TABLE_PATH = os.environ.get("CAESAR_FREQ_TABLE_PATH") or None
DEFAULT_THRESHOLD = float(
    os.environ.get("CAESAR_DEFAULT_THRESHOLD", ENGINE_DEFAULT_THRESHOLD)
)

app = Flask(__name__)
app.config["MAX_CONTENT_LENGTH"] = int(
    os.environ.get("CAESAR_MAX_CONTENT_LENGTH", 1024 * 1024)
)  # 1 MB request limit

logging.getLogger("werkzeug").setLevel(logging.INFO)

FREQ_TABLE = load_frequency_table(FREQ_TABLE_PATH) if FREQ_TABLE_PATH else ENGLISH_FREQ_TABLE

# Word list parsing is slow, so do it once up front rather than on the first request.
ENGLISH_VALIDATOR = initialize_lexicon(WORDLIST_PATH, DEFAULT_THRESHOLD)


ERROR_MESSAGES = {
    NonAsciiError: "Error: The input text contained non-ASCII characters, which are unsupported.",
    PlaintextInvalidError: (
        "Error: The most likely decrypted plaintext did not make sense to the validator "
        "you chose. Adjust your known plaintext (crib) or word list validation threshold."
    ),
}


def error_msg(err):
    for kind, message in ERROR_MESSAGES.items():
        if isinstance(err, kind):
            return message
    return f"Error: {err}"


def success_msg(key, plaintext):
    return f"Success after {key + 1} iterations:\n{plaintext}"


class RequestError(ValueError):
    pass


def _payload():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise RequestError("Request body must be a JSON object.")
    text = data.get("text", "")
    if not isinstance(text, str):
        raise RequestError("text must be a string.")
    return data, text


def _parse_key(raw):
    # JSON numbers arrive as int or float; only whole numbers are keys
    if isinstance(raw, bool):
        raise RequestError("Key must be an integer.")
    if isinstance(raw, float):
        if not raw.is_integer():
            raise RequestError("Key must be an integer.")
        return int(raw)
    if not isinstance(raw, (int, str)):
        raise RequestError("Key must be an integer.")
    try:
        return int(raw)
    except ValueError:
        raise RequestError("Key must be an integer.")


def _parse_threshold(raw):
    if raw is None or raw == "":
        return DEFAULT_THRESHOLD
    if isinstance(raw, bool):
        raise RequestError("Threshold must be a number between 0 and 1.")
    try:
        threshold = float(raw)
    except (TypeError, ValueError):
        threshold = math.nan
    if math.isnan(threshold):
        raise RequestError("Threshold must be a number between 0 and 1.")
    return threshold


@app.errorhandler(RequestError)
def handle_request_error(e):
    return jsonify({"error": str(e)}), 400


@app.errorhandler(CaesarError)
def handle_caesar_error(e):
    app.logger.info("caesar request failed: %s", e)
    return jsonify({"error": error_msg(e)}), 400


# ------------------- Manual encrypt / decrypt -------------------
@app.route("/api/encrypt", methods=["POST"])
def api_encrypt():
    data, text = _payload()
    key = _parse_key(data.get("key"))
    return jsonify({"result": caesar_encode(text, key)})


@app.route("/api/decrypt", methods=["POST"])
def api_decrypt():
    data, text = _payload()
    key = _parse_key(data.get("key"))
    return jsonify({"result": caesar_decode(text, key)})


# ------------------- Automatic decryption -------------------
def _auto_response(key, plaintext):
    return jsonify({
        "result": plaintext,
        "key": key,
        "iterations": key + 1,
        "message": success_msg(key, plaintext),
    })


@app.route("/api/decrypt/crib", methods=["POST"])
def api_decrypt_crib():
    data, text = _payload()
    crib = data.get("crib")
    if not isinstance(crib, str) or not crib:
        raise RequestError("A non-empty crib is required.")
    key, plaintext = decrypt_auto_crib(text, crib, FREQ_TABLE)
    return _auto_response(key, plaintext)


@app.route("/api/decrypt/english", methods=["POST"])
def api_decrypt_english():
    data, text = _payload()
    threshold = _parse_threshold(data.get("threshold"))
    key, plaintext = decrypt_auto_english(text, threshold, FREQ_TABLE)
    return _auto_response(key, plaintext)


@app.route("/api/break", methods=["POST"])
def api_break():
    _data, text = _payload()
    key, plaintext = caesar_break(text, FREQ_TABLE)
    scores = [
        {"key": k, "chi2": round(s, 3) if s != float("inf") else None}
        for k, s in rank_shifts(text, FREQ_TABLE)
    ]
    return jsonify({"result": plaintext, "key": key, "scores": scores})


@app.route("/api/health", methods=["GET"])
def health():
    return jsonify({
        "words": len(ENGLISH_VALIDATOR.word_list),
        "threshold": DEFAULT_THRESHOLD,
    })


if __name__ == "__main__":
    app.run(debug=True)
