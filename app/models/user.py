import enum
from sqlalchemy import Boolean, Column, Enum, Integer, String
from app.db.base import Base
from app.models.mixins import TimestampMixin


class Role(str, enum.Enum):
    """用户角色"""
    USER = "USER"
    ADMIN = "ADMIN"


class User(TimestampMixin, Base):
    """用户模型"""
    __tablename__ = "users"

    id = Column(
        Integer,
        primary_key=True,
        autoincrement=True,
        comment="User id"
    )
    email = Column(
        String(255),
        unique=True,
        nullable=False,
        index=True,
        comment="Login email, case-sensitive as stored"
    )
    password_hash = Column(
        String(255),
        nullable=False,
        comment="bcrypt password hash"
    )
    first_name = Column(
        String(100),
        nullable=False,
        comment="First name"
    )
    last_name = Column(
        String(100),
        nullable=False,
        comment="Last name"
    )
    role = Column(
        Enum(Role),
        nullable=False,
        default=Role.USER,
        comment="Authorization role"
    )
    enabled = Column(
        Boolean,
        nullable=False,
        default=True,
        comment="Disabled users cannot authenticate"
    )
    version = Column(Integer, nullable=False)

    __mapper_args__ = {"version_id_col": version}

    @property
    def roles(self):
        return [self.role.value]

    def __repr__(self):
        return f"<User(id={self.id}, email={self.email})>"
