# Importe tous les modèles pour enregistrer leurs tables dans Base.metadata
# avant que SQLAlchemy tente de résoudre les clés étrangères inter-modèles
# (coursework.student_id → students.id, coursework.course_id → courses.id).

from students_api.models.student import Student  # noqa: F401
from students_api.models.course import Course, CourseWork  # noqa: F401
