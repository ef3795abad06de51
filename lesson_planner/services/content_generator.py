from collections.abc import Callable, Sequence

from lesson_planner.models import (
    AssessmentType,
    Grade,
    MaterialType,
    ReferenceType,
    Semester,
    Subject,
    Tier,
)
from lesson_planner.schemas import (
    Assessment,
    GeneratedContent,
    LearningActivity,
    LearningObjective,
    MaterialTool,
    Reference,
    TeachingMethod,
)
from lesson_planner.utils import new_id

CURRICULUM_URL = "https://kurikulum.kemdikbud.go.id"
LEARNING_PORTAL_URL = "https://belajar.kemdikbud.go.id"


def calculate_total_duration(
    activities: Sequence[LearningActivity], methods: Sequence[TeachingMethod]
) -> int:
    """Total lesson time in minutes.

    Methods are carried out during the activities, so the two sums overlap.
    The total is the larger of them, never their sum.
    """
    activities_duration = sum(activity.duration_minutes for activity in activities)
    methods_duration = sum(method.duration_minutes for method in methods)
    return max(activities_duration, methods_duration)


class ContentGenerator:
    """
    Rule-based generator of lesson plan content.

    The output depends only on subject, material, grade and semester, apart
    from objective ids which come from ``id_factory``.
    """

    def __init__(self, id_factory: Callable[[], str] = new_id) -> None:
        self.id_factory = id_factory

    def generate(
        self, subject: Subject, material: str, grade: Grade, semester: Semester
    ) -> GeneratedContent:
        """Build every content block and the total duration for a new lesson plan."""
        tier = grade.tier
        teaching_methods = self.teaching_methods(material, tier)
        learning_activities = self.learning_activities(material)
        return GeneratedContent(
            learning_objectives=self.learning_objectives(material, tier),
            teaching_methods=teaching_methods,
            materials_tools=self.materials_tools(subject, grade, semester),
            learning_activities=learning_activities,
            assessments=self.assessments(material),
            references=self.references(subject, grade, material),
            total_duration_minutes=calculate_total_duration(learning_activities, teaching_methods),
        )

    def learning_objectives(self, material: str, tier: Tier) -> list[LearningObjective]:
        return [
            LearningObjective(
                id=f"obj-{self.id_factory()}",
                description=f"Students understand the basic concepts of {material} at the {tier.value} level",
                indicator=f"Can explain the definition, characteristics and everyday applications of {material}",
            ),
            LearningObjective(
                id=f"obj-{self.id_factory()}",
                description=f"Students analyse and apply their knowledge of {material}",
                indicator=f"Can identify problems and propose solutions related to {material}",
            ),
            LearningObjective(
                id=f"obj-{self.id_factory()}",
                description=f"Students show a critical and creative attitude while learning {material}",
                indicator="Takes an active part in discussions and asks relevant questions",
            ),
        ]

    @staticmethod
    def teaching_methods(material: str, tier: Tier) -> list[TeachingMethod]:
        if tier == Tier.ELEMENTARY:
            second = TeachingMethod(
                name="Role Play",
                description="Learning through games and enjoyable simulations",
                duration_minutes=30,
            )
        else:
            second = TeachingMethod(
                name="Group Discussion",
                description="Collaborative learning through small-group discussion",
                duration_minutes=30,
            )
        return [
            TeachingMethod(
                name="Interactive Lecture",
                description="Presenting the material with active participation from students",
                duration_minutes=20,
            ),
            second,
            TeachingMethod(
                name="Demonstration",
                description=f"Hands-on demonstration of the concepts of {material}",
                duration_minutes=15,
            ),
        ]

    @staticmethod
    def materials_tools(subject: Subject, grade: Grade, semester: Semester) -> list[MaterialTool]:
        if grade.tier == Tier.ELEMENTARY:
            visual_aid = MaterialTool(
                name="Teaching Aids",
                type=MaterialType.TOOL,
                description="Visual aids that make the concepts easier to grasp",
            )
        else:
            visual_aid = MaterialTool(
                name="Laptop/Projector",
                type=MaterialType.TOOL,
                description="Presentation device supporting digital learning",
            )
        return [
            MaterialTool(
                name=f"{subject.value} Textbook",
                type=MaterialType.RESOURCE,
                description=f"Official {subject.value} textbook for {grade.value} semester {semester.value}",
            ),
            MaterialTool(
                name="Whiteboard",
                type=MaterialType.TOOL,
                description="Board for explaining concepts and noting key points",
            ),
            visual_aid,
            MaterialTool(
                name="Student Worksheet",
                type=MaterialType.RESOURCE,
                description="Worksheet for practice and checking understanding",
            ),
        ]

    @staticmethod
    def learning_activities(material: str) -> list[LearningActivity]:
        return [
            LearningActivity(
                step=1,
                activity="Opening",
                duration_minutes=10,
                description=(
                    "Greeting, attendance, linking the previous lesson to the new material "
                    "and stating the learning objectives"
                ),
            ),
            LearningActivity(
                step=2,
                activity="Exploration",
                duration_minutes=15,
                description=f"Students observe and identify everyday examples of {material}",
            ),
            LearningActivity(
                step=3,
                activity="Elaboration",
                duration_minutes=30,
                description=(
                    f"Explaining the concepts of {material} through interactive lecture, "
                    "discussion and practical demonstration"
                ),
            ),
            LearningActivity(
                step=4,
                activity="Practice and Confirmation",
                duration_minutes=20,
                description="Students work through exercises and reflect on what they have learned",
            ),
            LearningActivity(
                step=5,
                activity="Closing",
                duration_minutes=5,
                description="Summary, short evaluation and a preview of the next lesson",
            ),
        ]

    @staticmethod
    def assessments(material: str) -> list[Assessment]:
        return [
            Assessment(
                type=AssessmentType.FORMATIVE,
                method="Observation",
                description="Observing student engagement and participation during the lesson",
                criteria="Asking and answering questions, taking part in group discussion",
            ),
            Assessment(
                type=AssessmentType.FORMATIVE,
                method="Oral Q&A",
                description="Checking understanding through spoken questions during the lesson",
                criteria="Accuracy and quality of the answers given",
            ),
            Assessment(
                type=AssessmentType.SUMMATIVE,
                method="Written Test",
                description="Comprehensive check through multiple-choice and essay questions",
                criteria="Correct answers and the ability to analyse the concepts studied",
            ),
            Assessment(
                type=AssessmentType.SUMMATIVE,
                method="Independent Assignment",
                description=f"Individual case analysis or project on {material}",
                criteria="Creativity, relevance to the material and on-time submission",
            ),
        ]

    @staticmethod
    def references(subject: Subject, grade: Grade, material: str) -> list[Reference]:
        return [
            Reference(
                title=f"{subject.value} Textbook for Grade {grade.value}",
                author="Ministry of Education, Culture, Research, and Technology",
                type=ReferenceType.BOOK,
            ),
            Reference(
                title="Kurikulum Merdeka - Learning Guide",
                author="Kemendikbudristek",
                url=CURRICULUM_URL,
                type=ReferenceType.WEBSITE,
            ),
            Reference(
                title=f"Learning Video: {material}",
                author="Rumah Belajar Portal",
                url=LEARNING_PORTAL_URL,
                type=ReferenceType.VIDEO,
            ),
            Reference(
                title=f"Article: Teaching {subject.value} in the Digital Era",
                author="Jurnal Pendidikan Indonesia",
                type=ReferenceType.ARTICLE,
            ),
        ]
