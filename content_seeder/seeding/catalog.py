"""
Fixed medical content tree seeded into a fresh backend.

Medicine / Endocrinology / Diabetes Mellitus, five sections, and points with
five sub-points each under "Pathophysiology of Diabetes" and "Type 2 Diabetes".
"""

from dataclasses import dataclass, field
from typing import Dict, List, Tuple


@dataclass(frozen=True)
class NodeDef:
    """A named node at a fixed position among its siblings."""
    key: str  # local key used in the ID map
    name: str
    description: str
    order_index: int


@dataclass(frozen=True)
class PointDef:
    """A point and its ordered sub-point texts."""
    name: str
    description: str
    order_index: int
    sub_points: Tuple[str, ...] = ()


@dataclass(frozen=True)
class SectionDef:
    name: str
    description: str
    order_index: int


@dataclass(frozen=True)
class ContentCatalog:
    """Everything the hierarchy builder creates, in creation order."""
    subject: NodeDef
    chapter: NodeDef
    lecture: NodeDef
    sections: Tuple[SectionDef, ...]
    points: Dict[str, Tuple[PointDef, ...]] = field(default_factory=dict)  # section name -> points

    def points_for(self, section_name: str) -> Tuple[PointDef, ...]:
        return self.points.get(section_name, ())

    def expected_counts(self) -> Dict[str, int]:
        all_points: List[PointDef] = [p for pts in self.points.values() for p in pts]
        return {
            "subjects": 1,
            "chapters": 1,
            "lectures": 1,
            "sections": len({s.name for s in self.sections}),
            "points": len({p.name for p in all_points}),
            "spoints": sum(len(p.sub_points) for p in all_points),
        }


PATHOPHYSIOLOGY = "Pathophysiology of Diabetes"
TYPE_2_DIABETES = "Type 2 Diabetes"


MEDICINE_CATALOG = ContentCatalog(
    subject=NodeDef(
        key="medicine",
        name="Medicine",
        description="Comprehensive medical education curriculum",
        order_index=1,
    ),
    chapter=NodeDef(
        key="endocrinology",
        name="Endocrinology",
        description="Study of the endocrine system and hormonal disorders",
        order_index=1,
    ),
    lecture=NodeDef(
        key="diabetes",
        name="Diabetes Mellitus",
        description="Comprehensive study of diabetes types, pathophysiology, and management",
        order_index=1,
    ),
    sections=(
        SectionDef(PATHOPHYSIOLOGY, "Understanding the mechanisms of diabetes development", 1),
        SectionDef("Type 1 Diabetes", "Autoimmune destruction of pancreatic beta cells", 2),
        SectionDef(TYPE_2_DIABETES, "Insulin resistance and relative insulin deficiency", 3),
        SectionDef("Diabetes Complications", "Acute and chronic complications of diabetes", 4),
        SectionDef("Diabetes Management", "Treatment strategies and monitoring", 5),
    ),
    points={
        PATHOPHYSIOLOGY: (
            PointDef(
                name="Insulin Secretion and Action",
                description="Normal insulin physiology and its disruption in diabetes",
                order_index=1,
                sub_points=(
                    "Beta cells in pancreatic islets produce insulin",
                    "Insulin promotes glucose uptake in muscle and adipose tissue",
                    "Insulin inhibits hepatic glucose production",
                    "Insulin resistance occurs when cells fail to respond to insulin",
                    "Chronic hyperglycemia leads to beta cell dysfunction",
                ),
            ),
            PointDef(
                name="Glucose Homeostasis",
                description="Regulation of blood glucose levels",
                order_index=2,
                sub_points=(
                    "Normal fasting glucose is 70-100 mg/dL",
                    "Postprandial glucose should be <140 mg/dL",
                    "Glucagon opposes insulin action",
                    "The liver stores glucose as glycogen",
                    "Gluconeogenesis produces glucose from non-carbohydrate sources",
                ),
            ),
            PointDef(
                name="Diagnostic Criteria",
                description="Laboratory values for diabetes diagnosis",
                order_index=3,
                sub_points=(
                    "Fasting glucose ≥126 mg/dL indicates diabetes",
                    "HbA1c ≥6.5% confirms diabetes diagnosis",
                    "Random glucose ≥200 mg/dL with symptoms indicates diabetes",
                    "OGTT 2-hour glucose ≥200 mg/dL confirms diabetes",
                    "Prediabetes: fasting glucose 100-125 mg/dL",
                ),
            ),
        ),
        TYPE_2_DIABETES: (
            PointDef(
                name="Risk Factors",
                description="Factors that increase T2DM risk",
                order_index=1,
                sub_points=(
                    "Obesity is the strongest risk factor for T2DM",
                    "Family history increases risk 2-6 fold",
                    "Physical inactivity contributes to insulin resistance",
                    "Age >45 years increases risk",
                    "Gestational diabetes history increases future T2DM risk",
                ),
            ),
            PointDef(
                name="Clinical Presentation",
                description="Signs and symptoms of T2DM",
                order_index=2,
                sub_points=(
                    "Polyuria (excessive urination) due to osmotic diuresis",
                    "Polydipsia (excessive thirst) secondary to dehydration",
                    "Polyphagia (excessive hunger) despite hyperglycemia",
                    "Unexplained weight loss despite normal appetite",
                    "Blurred vision from lens swelling",
                ),
            ),
        ),
    },
)
