import typer
from todocli.TODO.todo_app import todo_app
from todocli.CONFIG.config_app import config_app

app = typer.Typer(help="A todo.txt task list manager.")
app.add_typer(todo_app, name="todo", help="List, add, complete and archive todos.")
app.add_typer(config_app, name="config", help="Inspect the config file and resolved paths.")


if __name__ == "__main__":
    app()
