from dailydiet.db.base import Base

# Импорты моделей, чтобы Alembic и create_all их видели
from dailydiet.models.user import User  # noqa
from dailydiet.models.meal import Meal  # noqa
