from flask import Blueprint

# single blueprint for the catalog API
catalog_bp = Blueprint("catalog", __name__)

#  route modules register themselves on catalog_bp
from . import catalog    # noqa: F401, E402
