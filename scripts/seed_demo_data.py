from __future__ import annotations

import random
from datetime import time

from preempt.db.initializer import create_database_schema
from preempt.db.session import SessionLocal
from preempt.scheduler.entities import Weekday
from preempt.services import catalog

WORKDAYS = [Weekday.MON, Weekday.TUE, Weekday.WED, Weekday.THU, Weekday.FRI]


def seed_demo_data(count: int = 12) -> None:
    with SessionLocal() as session:
        catalog.add_context(session, name="Work", days=WORKDAYS, start_time=time(9, 0), end_time=time(17, 0))
        catalog.add_context(
            session,
            name="Evening",
            days=list(Weekday),
            start_time=time(19, 0),
            end_time=time(21, 0),
            transition_minutes=30,
        )
        for index in range(count):
            context = "Work" if index % 3 else "Evening"
            catalog.add_task(
                session,
                name=f"Demo Task {index + 1:02d}",
                description=f"Auto-generated task {index + 1}",
                priority=random.randint(0, 10),
                duration_minutes=random.randint(1, 4) * 25,
                context=context,
            )
        session.commit()


if __name__ == "__main__":
    create_database_schema()
    seed_demo_data()
    print("Seeded 2 contexts and 12 demo tasks.")
