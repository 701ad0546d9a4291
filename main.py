from todo_api.main import create_app

app = create_app()
