import logging

from flask import Flask
from config import Config
from extensions import catalog_store

def create_app(config_object=Config, overrides=None):
    app = Flask(__name__)
    app.config.from_object(config_object)
    if overrides:
        app.config.update(overrides)

    logging.basicConfig(level=app.config.get("LOG_LEVEL", "INFO"))

    # init extensions
    catalog_store.init_app(app)

    # import and register blueprints
    from routes import catalog_bp

    app.register_blueprint(catalog_bp)

    return app


if __name__ == "__main__":
    create_app().run(debug=True)
