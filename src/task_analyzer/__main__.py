# src/task_analyzer/__main__.py

from .cli.main import run

run()
