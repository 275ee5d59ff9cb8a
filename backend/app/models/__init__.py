from app.models.projects import Project
from app.models.tasks import Task
from app.models.team import TeamMember

__all__ = [
    "Project",
    "Task",
    "TeamMember",
]
