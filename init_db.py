import os
from dailyjournal.app import create_app
from dailyjournal.cli import seed_competencies
from dailyjournal.extensions import db

# Create a Flask app instance
app = create_app()

# Ensure the instance folder exists
if not os.path.exists(app.instance_path):
    os.makedirs(app.instance_path)
    print(f"Instance folder created at: {app.instance_path}")

# Push an application context to make the db object available
with app.app_context():
    print("Creating database tables...")
    db.create_all()
    added = seed_competencies(db.session)
    print(f"Database ready. {added} competencies added to the catalog.")
