from task_manager.routes import health, tasks

__all__ = ["health", "tasks"]
