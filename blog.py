"""
Public blog engagement: views, likes, comments and related posts.

Likes are deduplicated by a reader id the browser generates and keeps in
local storage. Anyone can send any id, so this only stops accidental double
likes; it is not an abuse control.
"""

from typing import Any, Dict, List

from bson import ObjectId
from pymongo import ReturnDocument
from pymongo.database import Database

from database import serialize_doc, to_object_id, utcnow
from exceptions import CommentNotFoundError, ResourceNotFoundError
from logging_config import get_logger
from schemas import CommentCreate

logger = get_logger("blog")

BLOG_COLLECTION = "blog"
RELATED_LIMIT = 5
MOST_ENGAGED_LIMIT = 5

# Fields every blog document starts with
ENGAGEMENT_DEFAULTS: Dict[str, Any] = {
    "views": 0,
    "likes": 0,
    "likedBy": [],
    "comments": [],
}


def _blog_id(post_id: str) -> ObjectId:
    oid = to_object_id(post_id)
    if oid is None:
        raise ResourceNotFoundError("Blog", post_id)
    return oid


def _get_post(database: Database, post_id: str, projection=None) -> Dict[str, Any]:
    doc = database[BLOG_COLLECTION].find_one({"_id": _blog_id(post_id)}, projection)
    if doc is None:
        raise ResourceNotFoundError("Blog", post_id)
    return doc


def increment_view(database: Database, post_id: str) -> int:
    doc = database[BLOG_COLLECTION].find_one_and_update(
        {"_id": _blog_id(post_id)},
        {"$inc": {"views": 1}},
        projection={"views": 1},
        return_document=ReturnDocument.AFTER,
    )
    if doc is None:
        raise ResourceNotFoundError("Blog", post_id)
    return doc["views"]


def toggle_like(database: Database, post_id: str, user_id: str) -> Dict[str, Any]:
    """Add ``user_id`` to likedBy if absent, otherwise remove it.

    Each branch is a single conditional update, so ``likes`` moves together
    with ``likedBy`` membership.
    """
    oid = _blog_id(post_id)
    blogs = database[BLOG_COLLECTION]

    doc = blogs.find_one_and_update(
        {"_id": oid, "likedBy": {"$ne": user_id}},
        {"$addToSet": {"likedBy": user_id}, "$inc": {"likes": 1}},
        projection={"likes": 1},
        return_document=ReturnDocument.AFTER,
    )
    if doc is not None:
        return {"likes": doc["likes"], "has_liked": True}

    doc = blogs.find_one_and_update(
        {"_id": oid, "likedBy": user_id},
        {"$pull": {"likedBy": user_id}, "$inc": {"likes": -1}},
        projection={"likes": 1},
        return_document=ReturnDocument.AFTER,
    )
    if doc is not None:
        return {"likes": doc["likes"], "has_liked": False}

    raise ResourceNotFoundError("Blog", post_id)


def add_comment(database: Database, post_id: str, comment: CommentCreate) -> Dict[str, Any]:
    new_comment = {
        "id": str(ObjectId()),
        **comment.model_dump(by_alias=True),
        "createdAt": utcnow(),
        "approved": True,
    }
    result = database[BLOG_COLLECTION].update_one(
        {"_id": _blog_id(post_id)},
        {"$push": {"comments": new_comment}},
    )
    if result.matched_count == 0:
        raise ResourceNotFoundError("Blog", post_id)
    logger.info(f"Comment {new_comment['id']} added to blog {post_id}")
    return new_comment


def list_comments(database: Database, post_id: str) -> List[Dict[str, Any]]:
    doc = _get_post(database, post_id, {"comments": 1})
    comments = [c for c in doc.get("comments", []) if c.get("approved", True)]
    return sorted(comments, key=lambda c: c["createdAt"])


def delete_comment(database: Database, post_id: str, comment_id: str) -> None:
    doc = _get_post(database, post_id, {"comments": 1})
    if not any(c.get("id") == comment_id for c in doc.get("comments", [])):
        raise CommentNotFoundError(comment_id)
    database[BLOG_COLLECTION].update_one(
        {"_id": doc["_id"]},
        {"$pull": {"comments": {"id": comment_id}}},
    )
    logger.info(f"Comment {comment_id} removed from blog {post_id}")


def _overlap(source: Dict[str, Any], other: Dict[str, Any]) -> int:
    score = len(set(source.get("tags") or []) & set(other.get("tags") or []))
    if source.get("category") and source.get("category") == other.get("category"):
        score += 1
    return score


def related_posts(database: Database, post_id: str, limit: int = RELATED_LIMIT) -> List[Dict[str, Any]]:
    """Other published posts sharing the category or a tag, best match first.

    Equal scores fall back to the newest post.
    """
    source = _get_post(database, post_id)
    clauses = []
    if source.get("category"):
        clauses.append({"category": source["category"]})
    if source.get("tags"):
        clauses.append({"tags": {"$in": source["tags"]}})
    if not clauses:
        return []

    candidates = database[BLOG_COLLECTION].find({
        "_id": {"$ne": source["_id"]},
        "published": True,
        "$or": clauses,
    })
    # ObjectIds grow with insertion time, so they break ties by recency
    scored = sorted(
        ((_overlap(source, c), c["_id"], c) for c in candidates),
        key=lambda item: (item[0], item[1]),
        reverse=True,
    )
    return [serialize_doc(c) for _, _, c in scored[:limit]]


def engagement_summary(database: Database, limit: int = MOST_ENGAGED_LIMIT) -> Dict[str, Any]:
    """Totals shown on the admin dashboard, plus the most engaged posts."""
    posts = []
    totals = {"views": 0, "likes": 0, "comments": 0}
    for doc in database[BLOG_COLLECTION].find({}, {"title": 1, "views": 1, "likes": 1, "comments": 1}):
        views = doc.get("views") or 0
        likes = doc.get("likes") or 0
        comments = len(doc.get("comments") or [])
        totals["views"] += views
        totals["likes"] += likes
        totals["comments"] += comments
        posts.append({
            "id": str(doc["_id"]),
            "title": doc.get("title", ""),
            "views": views,
            "likes": likes,
            "comments": comments,
            "engagement": views + likes + comments,
        })

    posts.sort(key=lambda p: p["engagement"], reverse=True)
    return {
        "totalViews": totals["views"],
        "totalLikes": totals["likes"],
        "totalComments": totals["comments"],
        "totalEngagement": totals["views"] + totals["likes"] + totals["comments"],
        "mostEngaged": posts[:limit],
    }
