from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy import Integer, String
from liftlog.db import Base

class Exercise(Base):
    __tablename__ = "exercises"
    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    # No FK: the workout row is only written when the workout finishes
    workout_id: Mapped[str] = mapped_column(String(36), index=True, nullable=False)
    name: Mapped[str] = mapped_column(String(120), nullable=False)
    position: Mapped[int] = mapped_column(Integer, nullable=False, default=1)

    sets = relationship("ExerciseSet", back_populates="exercise", cascade="all, delete-orphan")
