"""
Notification recipient resolution.

Recipients are the teacher's registered students followed by the students
mentioned in the notification text, each email at most once, keeping only
students that exist and are not suspended. Mentions of unknown emails are
dropped without error.
"""

from __future__ import annotations

import logging

from students import repository as student_repository

from . import mentions, schemas

logger = logging.getLogger(__name__)


async def retrieve_for_notifications(payload: schemas.NotificationRequest) -> list[str]:
    registered = await student_repository.students_of_teacher(payload.teacher)
    mentioned = mentions.extract_mentions(payload.notification)

    candidates = list(dict.fromkeys([*registered, *mentioned]))
    eligible = set(await student_repository.active_students(candidates))
    recipients = [email for email in candidates if email in eligible]

    logger.info(
        "recipients_resolved teacher=%s registered=%s mentioned=%s recipients=%s",
        payload.teacher,
        len(registered),
        len(mentioned),
        len(recipients),
    )
    return recipients
