from flask import Blueprint
from ..controllers.wol_controller import send_wake

wol_bp = Blueprint('wol_bp', __name__)
wol_bp.route('/send', methods=['POST'])(send_wake)
