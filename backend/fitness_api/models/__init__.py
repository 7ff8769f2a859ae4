"""ORM Models: one table per collection: workouts, progress, users.

Invariants:
    - All models inherit from Base (db/base.py)
    - No relationships between tables; progress.user_id is not a foreign key
    - Every model has a created_at column (listing order)
"""

from fitness_api.models.workout import Workout  # noqa: F401
from fitness_api.models.progress import Progress  # noqa: F401
from fitness_api.models.user import User  # noqa: F401
