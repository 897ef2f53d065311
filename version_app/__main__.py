from version_app.main import run

run()
