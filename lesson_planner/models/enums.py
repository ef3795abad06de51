from enum import Enum
from types import MappingProxyType


class Subject(str, Enum):
    MATEMATIKA = "Matematika"
    IPA = "IPA"
    IPS = "IPS"
    BAHASA_INDONESIA = "Bahasa Indonesia"
    BAHASA_INGGRIS = "Bahasa Inggris"
    SEJARAH = "Sejarah"
    GEOGRAFI = "Geografi"
    EKONOMI = "Ekonomi"
    SOSIOLOGI = "Sosiologi"
    FISIKA = "Fisika"
    KIMIA = "Kimia"
    BIOLOGI = "Biologi"
    PKN = "PKN"
    PJOK = "PJOK"
    SENI_BUDAYA = "Seni Budaya"
    PRAKARYA = "Prakarya"
    INFORMATIKA = "Informatika"


class Grade(str, Enum):
    SD_1 = "1 SD"
    SD_2 = "2 SD"
    SD_3 = "3 SD"
    SD_4 = "4 SD"
    SD_5 = "5 SD"
    SD_6 = "6 SD"
    SMP_7 = "7 SMP"
    SMP_8 = "8 SMP"
    SMP_9 = "9 SMP"
    SMA_10 = "10 SMA"
    SMA_11 = "11 SMA"
    SMA_12 = "12 SMA"
    SMK_10 = "10 SMK"
    SMK_11 = "11 SMK"
    SMK_12 = "12 SMK"

    @property
    def tier(self) -> "Tier":
        return GRADE_TIERS[self]


class Semester(str, Enum):
    FIRST = "1"
    SECOND = "2"


class Tier(str, Enum):
    """Coarse grouping of grades used to branch content templates."""

    ELEMENTARY = "elementary"
    LOWER_SECONDARY = "lower-secondary"
    UPPER_SECONDARY = "upper-secondary/vocational"


GRADE_TIERS = MappingProxyType({
    Grade.SD_1: Tier.ELEMENTARY,
    Grade.SD_2: Tier.ELEMENTARY,
    Grade.SD_3: Tier.ELEMENTARY,
    Grade.SD_4: Tier.ELEMENTARY,
    Grade.SD_5: Tier.ELEMENTARY,
    Grade.SD_6: Tier.ELEMENTARY,
    Grade.SMP_7: Tier.LOWER_SECONDARY,
    Grade.SMP_8: Tier.LOWER_SECONDARY,
    Grade.SMP_9: Tier.LOWER_SECONDARY,
    Grade.SMA_10: Tier.UPPER_SECONDARY,
    Grade.SMA_11: Tier.UPPER_SECONDARY,
    Grade.SMA_12: Tier.UPPER_SECONDARY,
    Grade.SMK_10: Tier.UPPER_SECONDARY,
    Grade.SMK_11: Tier.UPPER_SECONDARY,
    Grade.SMK_12: Tier.UPPER_SECONDARY,
})


class MaterialType(str, Enum):
    TOOL = "tool"
    RESOURCE = "resource"


class AssessmentType(str, Enum):
    FORMATIVE = "formative"
    SUMMATIVE = "summative"


class ReferenceType(str, Enum):
    BOOK = "book"
    WEBSITE = "website"
    VIDEO = "video"
    ARTICLE = "article"
