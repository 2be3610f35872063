"""
Content seeder for the educational-content REST API.

Seeds a Subject -> Chapter -> Lecture -> Section -> Point -> SPoint tree
and probes the auth endpoints.
"""

__version__ = "1.0.0"
