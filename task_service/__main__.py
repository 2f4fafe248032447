"""Run the task service with `python -m task_service`."""

from task_service.main import run

if __name__ == "__main__":
    run()
