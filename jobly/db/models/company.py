from sqlalchemy import Column, Integer, String, Text, CheckConstraint
from jobly.db.base import Base


class Company(Base):
    __tablename__ = "companies"
    __table_args__ = (
        CheckConstraint("num_employees >= 0", name="ck_companies_num_employees"),
    )

    handle = Column(String(25), primary_key=True)
    name = Column(Text, unique=True, nullable=False)
    num_employees = Column(Integer)
    description = Column(Text, nullable=False)
    logo_url = Column(Text)
