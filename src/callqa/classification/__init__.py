"""Speaker role and question classification."""

from callqa.classification.questions import QuestionDetector, has_question
from callqa.classification.roles import RoleClassifier, SpeakerRole

__all__ = ["QuestionDetector", "RoleClassifier", "SpeakerRole", "has_question"]
