from ..extensions import db

# Seeded by `flask seed-competencies`; the application never writes these.
DEFAULT_COMPETENCIES = [
    ("Communication", "Expressing ideas clearly in writing and speech."),
    ("Teamwork", "Working with others toward a shared goal."),
    ("Problem Solving", "Analysing issues and finding workable solutions."),
    ("Critical Thinking", "Evaluating information to form sound judgements."),
    ("Leadership", "Guiding and motivating others."),
    ("Professionalism", "Reliability, integrity and accountability at work."),
    ("Digital Technology", "Using technology effectively to get work done."),
    ("Career Development", "Reflecting on strengths and planning next steps."),
]


class Competency(db.Model):
    id = db.Column(db.Integer, primary_key=True)
    skill = db.Column(db.String(128), unique=True, nullable=False)
    description = db.Column(db.Text, nullable=False, default="")

    def to_dict(self):
        return {"id": self.id, "skill": self.skill, "description": self.description}
