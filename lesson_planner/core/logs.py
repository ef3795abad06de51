START = "Starting %s (%s)"
STOP = "%s stopped"

LESSON_PLAN_CREATED = "Lesson plan %s created: %s %s semester %s"
LESSON_PLAN_UPDATED = "Lesson plan %s updated, fields: %s"
LESSON_PLAN_UPDATE_REJECTED = "Lesson plan %s update rejected: %s"
LESSON_PLAN_DELETED = "Lesson plan %s deleted"
LESSON_PLAN_NOT_FOUND = "Lesson plan %s not found"

STORAGE_ERROR = "Storage error on %s %s"
UNHANDLED_ERROR = "Unhandled error on %s %s"
