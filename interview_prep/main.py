from interview_prep.core.app_factory import create_app

app = create_app()
