from app.crud.base import CRUDProfileChild
from app.models.education import Education


class CRUDEducation(CRUDProfileChild[Education]):

    def default_order(self):
        # 在读（无毕业日期）的排在前面
        return (Education.graduation_date.desc().nulls_first(), Education.id)


education = CRUDEducation(Education)
