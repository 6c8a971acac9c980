from flask import render_template, current_app
from flask_login import login_required, current_user

from ...extensions import db
from ...models.competency import Competency
from ...store import EntryStore
from .helpers import to_thoughts, skill_names
from . import thoughts_bp


def _page_data():
    competencies = Competency.query.order_by(Competency.id.asc()).all()
    thoughts = to_thoughts(EntryStore(db.session).list_for_owner(current_user.email))
    catalog = {c.id: c.skill for c in competencies}
    return competencies, thoughts, catalog


@thoughts_bp.route("/")
@login_required
def home():
    """Composer plus the most recent thoughts."""
    competencies, thoughts, catalog = _page_data()
    recent = thoughts[: current_app.config.get("RECENT_THOUGHTS", 5)]
    return render_template(
        "thoughts/home.html",
        competencies=competencies,
        thoughts=recent,
        has_thoughts=bool(thoughts),
        catalog=catalog,
        skill_names=skill_names,
    )


@thoughts_bp.route("/thoughts")
@login_required
def history():
    _, thoughts, catalog = _page_data()
    return render_template(
        "thoughts/list.html",
        thoughts=thoughts,
        catalog=catalog,
        skill_names=skill_names,
    )
