"""
Content seeding workflow.

Auth bootstrap, hierarchy builder and result recorder, driven by run_seed().
"""

from content_seeder.seeding.catalog import MEDICINE_CATALOG, ContentCatalog, NodeDef, PointDef, SectionDef
from content_seeder.seeding.context import SeedContext
from content_seeder.seeding.auth_bootstrap import bootstrap_auth, generate_admin_credentials
from content_seeder.seeding.hierarchy_builder import BuildOutcome, HierarchyBuilder
from content_seeder.seeding.recorder import load_record, save_record
from content_seeder.seeding.runner import SeedOutcome, run_seed

__all__ = [
    "MEDICINE_CATALOG",
    "ContentCatalog",
    "NodeDef",
    "PointDef",
    "SectionDef",
    "SeedContext",
    "bootstrap_auth",
    "generate_admin_credentials",
    "BuildOutcome",
    "HierarchyBuilder",
    "load_record",
    "save_record",
    "SeedOutcome",
    "run_seed",
]
