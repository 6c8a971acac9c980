from flask import Blueprint

thoughts_bp = Blueprint("thoughts", __name__)
