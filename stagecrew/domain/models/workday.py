"""Workdays, task types, assignments and their time entries."""

from sqlalchemy import Boolean, Column, Date, Float, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from stagecrew.infrastructure.database import Base

SHIFT = "SHIFT"
ACTIVITY = "ACTIVITY"


class TaskType(Base):
    __tablename__ = "task_types"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), nullable=False)
    type = Column(String(20), nullable=False, default=ACTIVITY)  # SHIFT, ACTIVITY
    color = Column(String(20), nullable=True)


class Workday(Base):
    __tablename__ = "workdays"

    id = Column(Integer, primary_key=True, autoincrement=True)
    date = Column(Date, nullable=False, index=True)
    is_open = Column(Boolean, nullable=False, default=True)

    assignments = relationship("Assignment", back_populates="workday")

    def __repr__(self):
        return f"<Workday {self.date}>"


class Assignment(Base):
    __tablename__ = "assignments"

    id = Column(Integer, primary_key=True, autoincrement=True)
    workday_id = Column(Integer, ForeignKey("workdays.id"), nullable=False, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=True, index=True)
    task_type_id = Column(Integer, ForeignKey("task_types.id"), nullable=False)
    start_time = Column(String(5), nullable=False)  # HH:MM
    end_time = Column(String(5), nullable=False)

    workday = relationship("Workday", back_populates="assignments")
    user = relationship("User")
    task_type = relationship("TaskType")
    time_entries = relationship("TimeEntry", back_populates="assignment")

    def __repr__(self):
        return f"<Assignment {self.id} {self.start_time}-{self.end_time}>"


class TimeEntry(Base):
    __tablename__ = "time_entries"

    id = Column(Integer, primary_key=True, autoincrement=True)
    assignment_id = Column(Integer, ForeignKey("assignments.id"), nullable=False, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    start_time = Column(String(5), nullable=True)
    end_time = Column(String(5), nullable=True)
    hours = Column(Float, nullable=True)

    assignment = relationship("Assignment", back_populates="time_entries")
