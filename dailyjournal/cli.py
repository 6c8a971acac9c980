import click
from flask import current_app
from flask.cli import with_appcontext

from .extensions import db
from .models.competency import Competency, DEFAULT_COMPETENCIES


def seed_competencies(session, competencies=DEFAULT_COMPETENCIES) -> int:
    """Insert catalog rows whose skill is not present yet. Returns how many were added."""
    existing = {skill for (skill,) in session.query(Competency.skill)}
    added = 0
    for skill, description in competencies:
        if skill in existing:
            continue
        session.add(Competency(skill=skill, description=description))
        added += 1
    session.commit()
    return added


@click.command("seed-competencies")
@with_appcontext
def seed_competencies_command():
    """Create missing tables and load the default competency catalog."""
    db.create_all()
    added = seed_competencies(db.session)
    current_app.logger.info(f"Seeded {added} competencies")
    click.echo(f"Seeded {added} competencies.")
