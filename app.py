from flask import Flask, request, jsonify
from requests.exceptions import RequestException

from curl_parser import CurlError, CurlParser, ParserConfig, build_request

app = Flask(__name__)
parser = CurlParser(config=ParserConfig.from_env())


def _parse_payload():
    payload = request.get_json(force=True, silent=True)
    if not isinstance(payload, dict):
        return None
    curl_cmd = payload.get("curl", "")
    # Альтернативный режим: уже разбитый список аргументов
    args = payload.get("args")

    if isinstance(curl_cmd, str) and curl_cmd:
        return parser.parse(curl_cmd)
    if isinstance(args, list) and all(isinstance(a, str) for a in args):
        return parser.parse(args)
    return None


@app.post("/parse")
def parse():
    try:
        parsed = _parse_payload()
    except CurlError as e:
        return jsonify({"error": str(e)}), 400

    if parsed is None:
        return jsonify({"error": "Нужно передать поле 'curl' или 'args'"}), 400
    return jsonify(parsed.to_dict()), 200


@app.post("/request")
def prepare():
    try:
        parsed = _parse_payload()
        if parsed is None:
            return jsonify({"error": "Нужно передать поле 'curl' или 'args'"}), 400
        prepared = build_request(parsed).prepare()
    except CurlError as e:
        return jsonify({"error": str(e)}), 400
    except RequestException as e:
        return jsonify({"error": f"Request error: {e}"}), 400

    # запрос только собираем, в сеть не отправляем
    return jsonify({
        "request": {
            "method": prepared.method,
            "url": prepared.url,
            "headers": dict(prepared.headers),
            "has_body": prepared.body is not None,
        },
    }), 200


if __name__ == "__main__":
    app.run(host="0.0.0.0", port=7700, debug=True)
