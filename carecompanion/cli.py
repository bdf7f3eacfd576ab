# carecompanion/cli.py
import click
from flask import current_app

from carecompanion.models import HealthTip
from carecompanion.services.health_service import create_health_tip

DEFAULT_TIPS = [
    {
        "title": "Stay Hydrated",
        "content": "Drink a glass of water with every meal and keep a bottle nearby. "
                   "Thirst signals weaken with age, so drink before you feel thirsty.",
        "category": "nutrition",
        "author_name": "Dr. Sarah Johnson",
        "author_credentials": "MD, Geriatric Medicine",
    },
    {
        "title": "Take Medications at the Same Time Each Day",
        "content": "Linking your medications to a daily habit, like breakfast, "
                   "makes it easier to remember every dose.",
        "category": "medication",
        "author_name": "Michael Chen",
        "author_credentials": "PharmD",
    },
    {
        "title": "Gentle Daily Walks",
        "content": "A 20 minute walk most days helps blood pressure, balance and mood. "
                   "Start slowly and wear supportive shoes.",
        "category": "exercise",
        "author_name": "Dr. Emily Rodriguez",
        "author_credentials": "DPT, Physical Therapy",
    },
    {
        "title": "Check Your Blood Pressure at Rest",
        "content": "Sit quietly for five minutes with your feet flat on the floor before "
                   "measuring. Record the reading right away.",
        "category": "heart_health",
        "author_name": "Dr. James Wilson",
        "author_credentials": "MD, Cardiology",
    },
]


def register_commands(app):
    @app.cli.command("seed-tips")
    def seed_tips():
        """Insert the built-in health tips when none exist yet."""
        if HealthTip.query.first() is not None:
            click.echo("Health tips already present; nothing to do.")
            return
        for tip in DEFAULT_TIPS:
            create_health_tip(**tip)
        current_app.logger.info("Seeded %d health tips", len(DEFAULT_TIPS))
        click.echo(f"Inserted {len(DEFAULT_TIPS)} health tips.")

    @app.cli.command("add-tip")
    @click.option("--title", required=True)
    @click.option("--content", required=True)
    @click.option("--category", required=True)
    @click.option("--author-name", required=True)
    @click.option("--author-credentials", required=True)
    @click.option("--image-url", default=None)
    def add_tip(title, content, category, author_name, author_credentials, image_url):
        """Insert one health tip."""
        tip = create_health_tip(
            title=title,
            content=content,
            category=category,
            author_name=author_name,
            author_credentials=author_credentials,
            image_url=image_url,
        )
        click.echo(f"Created health tip {tip.id}")
