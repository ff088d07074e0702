from saute.catalog.skills import Skill
from saute.catalog.lessons import Step, Lesson, LessonCatalog, load_lessons, lesson_catalog
