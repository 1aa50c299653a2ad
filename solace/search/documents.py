"""Map ORM rows to search documents (also the shape returned by the DB fallback)."""

from solace.db.models import ForumTopic, Meetup, Memorial, Profile, Resource


def _iso(value):
    return value.isoformat() if value is not None else None


def profile_doc(profile: Profile) -> dict:
    return {
        "id": profile.id,
        "display_name": profile.display_name,
        "bio": profile.bio,
        "profile_image_url": profile.profile_image_url,
        "verification_status": profile.verification_status,
    }


def memorial_doc(memorial: Memorial) -> dict:
    return {
        "id": memorial.id,
        "slug": memorial.slug,
        "name": memorial.name,
        "obituary": memorial.obituary,
        "life_story": memorial.life_story,
        "date_of_passing": _iso(memorial.date_of_passing),
        "profile_photo_url": memorial.profile_photo_url,
    }


def meetup_doc(meetup: Meetup) -> dict:
    return {
        "id": meetup.id,
        "title": meetup.title,
        "description": meetup.description,
        "format": meetup.format,
        "location_city": meetup.location_city,
        "start_time": _iso(meetup.start_time),
    }


def topic_doc(topic: ForumTopic) -> dict:
    return {
        "id": topic.id,
        "title": topic.title,
        "slug": topic.slug,
        "category_id": topic.category_id,
        "reply_count": topic.reply_count,
        "created_at": _iso(topic.created_at),
    }


def resource_doc(resource: Resource) -> dict:
    return {
        "id": resource.id,
        "title": resource.title,
        "description": resource.description,
        "resource_type": resource.resource_type,
        "categories": resource.categories,
    }
