from __future__ import annotations

from src.attendance_tracker.attendance_tracker.main import create_app, load_settings

app = create_app()


if __name__ == "__main__":
    settings = load_settings()
    app.run(host=settings["HOST"], port=int(settings["PORT"]), debug=bool(settings.get("DEBUG", False)))
