"""Company domain model — maps to the 'companies' table."""

from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship

from stagecrew.infrastructure.database import Base


class Company(Base):
    __tablename__ = "companies"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)

    users = relationship("User", back_populates="company")

    def __repr__(self):
        return f"<Company {self.name}>"
