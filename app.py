from flask import Flask, jsonify
from flask_cors import CORS

import config
from routes.calculator_routes import calculator_bp


app = Flask(__name__)
CORS(app, origins=config.CORS_ORIGINS)

app.secret_key = config.SECRET_KEY
app.logger.setLevel(config.LOG_LEVEL)

# Register blueprints
app.register_blueprint(calculator_bp)


@app.errorhandler(404)
def not_found(e):
    return jsonify({"error": "Not found"}), 404


if __name__ == "__main__":
    app.run(host='0.0.0.0', port=config.PORT, debug=False)
