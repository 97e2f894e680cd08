from sqlalchemy import Column, Integer, String, CheckConstraint
from constants import UserFieldLimits
from database import Base


class User(Base):
    """
    A registered user.

    ``dob`` is stored as text exactly as submitted; any layout accepted by
    ``utils.date_utils.parse_date`` is valid, and responses normalize it to
    ``YYYY-MM-DD``.
    """
    __tablename__ = 'users'

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(UserFieldLimits.NAME_MAX_LENGTH), nullable=False)
    dob = Column(String(UserFieldLimits.DOB_MAX_LENGTH), nullable=False)

    __table_args__ = (
        CheckConstraint("name != ''", name='ck_users_name_not_empty'),
    )

    def __repr__(self):
        return f"<User id={self.id} name={self.name!r} dob={self.dob!r}>"
