# __init__.py
from skillgap.data.jobs import DEFAULT_JOB_TITLE, JobProfile, RequiredSkill, list_job_profiles, lookup_job_profile
from skillgap.data.resources import LearningResource, resources_for

__all__ = [
    "DEFAULT_JOB_TITLE",
    "JobProfile",
    "RequiredSkill",
    "list_job_profiles",
    "lookup_job_profile",
    "LearningResource",
    "resources_for",
]
