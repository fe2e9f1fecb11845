"""
Fan-out of "new content" notifications to users subscribed to a category.
Called after a successful create; a failure here never undoes the save.
"""
import logging

from casebook import db
from casebook.models import Notification, Subscription

logger = logging.getLogger(__name__)


def notify_subscribers(category_name, title, message, link, type='update'):
    """One Notification per subscriber of `category_name`. Returns the count sent."""
    if not category_name:
        return 0
    try:
        user_ids = {
            row.user_id
            for row in Subscription.query.filter_by(category=category_name).all()
        }
        for user_id in sorted(user_ids):
            db.session.add(Notification(
                user_id=user_id,
                type=type,
                title=title,
                message=message,
                link=link,
            ))
        db.session.commit()
        logger.info("Sent %d notifications for category %r", len(user_ids), category_name)
        return len(user_ids)
    except Exception as e:
        db.session.rollback()
        logger.exception("Notification fan-out failed for %r: %s", category_name, e)
        return 0


def notify_new_case(case):
    return notify_subscribers(
        case.category,
        f"New Clinical Case: {case.category}",
        f"New case available: {case.display_title}",
        f"/?trial={case.id}",
    )


def notify_new_inscription(inscription):
    category_name = inscription.category.name if inscription.category else ''
    return notify_subscribers(
        category_name,
        f"New Inscription: {category_name}",
        f"New theory available: {inscription.display_title}",
        f"/?inscription={inscription.id}",
    )


def notify_new_lab(lab):
    return notify_subscribers(
        lab.category,
        f"New Alchemist Potion: {lab.category}",
        f"New formulation available: {lab.display_title}",
        f"/?lab={lab.id}",
    )
