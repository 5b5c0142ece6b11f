"""
SavedJob repository - data access for SavedJob entity.
"""
from jobportal.models.saved_job import SavedJob
from jobportal.repositories.base import UserJobRepository


class SavedJobRepository(UserJobRepository[SavedJob]):
    def __init__(self):
        super().__init__(SavedJob)
