from flask import Blueprint
from ..controllers.health_controller import health

health_bp = Blueprint('health_bp', __name__)
health_bp.route('/health', methods=['GET'])(health)
