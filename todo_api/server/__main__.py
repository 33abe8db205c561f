from todo_api.server.main import run

run()
