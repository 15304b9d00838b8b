from app.crud.crud_education import education as crud_education
from app.services import mapper
from app.services.profile_child_service import ProfileChildService


class EducationService(ProfileChildService):
    """教育经历服务类，在读的排在前面"""

    crud = crud_education
    entity_name = "Education"
    from_create = staticmethod(mapper.education_from_create)
    to_response = staticmethod(mapper.education_to_response)
