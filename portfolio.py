from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Body, Depends, Query, Response
from pymongo.database import Database

import blog
import seeds
from auth import get_current_admin
from database import get_db
from resources import Collection, Singleton
from schemas import (
    About,
    Achievement,
    Blog,
    Comment,
    CommentCreate,
    Contact,
    Education,
    Hero,
    Leadership,
    LikeRequest,
    LikeResult,
    Project,
    Skill,
    ViewResult,
)

router = APIRouter(prefix="/api/portfolio", tags=["portfolio"])


def clamp_skill_level(doc: Dict[str, Any]) -> Dict[str, Any]:
    level = doc.get("level")
    if isinstance(level, (int, float)):
        doc["level"] = max(0, min(100, int(level)))
    return doc


# ==========
# Resources
# ==========
projects = Collection(
    "Project", "project", Project,
    sort=[("featured", -1), ("order", 1), ("createdAt", -1)],
    seeds=seeds.PROJECTS,
)
skills = Collection(
    "Skill", "skill", Skill,
    sort=[("category", 1), ("order", 1), ("createdAt", -1)],
    seeds=seeds.SKILLS,
    on_read=clamp_skill_level,
)
education = Collection("Education", "education", Education, seeds=seeds.EDUCATION)
blogs = Collection(
    "Blog", "blog", Blog,
    sort=[("date", -1), ("order", 1), ("createdAt", -1)],
    seeds=seeds.BLOGS,
    create_defaults=blog.ENGAGEMENT_DEFAULTS,
)
leadership = Collection("Leadership", "leadership", Leadership, seeds=seeds.LEADERSHIP)
achievements = Collection("Achievement", "achievement", Achievement, seeds=seeds.ACHIEVEMENTS)

# Order here is the order of the stats response
COLLECTIONS: Dict[str, Collection] = {
    "projects": projects,
    "skills": skills,
    "achievements": achievements,
    "blogs": blogs,
    "education": education,
    "leadership": leadership,
}

hero = Singleton("Hero", "hero", Hero, seeds.HERO)
about = Singleton("About", "about", About, seeds.ABOUT)
contact = Singleton("Contact", "contact", Contact, seeds.CONTACT)


def seed_all(database: Database) -> None:
    """Seed every collection and create the singletons up front."""
    for resource in COLLECTIONS.values():
        resource.ensure_seeded(database)
    for singleton in (hero, about, contact):
        singleton.get(database)


# =========================
# Generic collection routes
# =========================

def register_collection(path: str, resource: Collection, with_list: bool = True) -> None:
    schema = resource.schema

    if with_list:
        @router.get(f"/{path}", name=f"list_{path}")
        def list_items(db: Database = Depends(get_db)):
            return resource.list(db)

    @router.get(f"/{path}/{{item_id}}", name=f"get_{path}")
    def get_item(item_id: str, db: Database = Depends(get_db)):
        return resource.get(db, item_id)

    @router.post(f"/{path}", status_code=201, name=f"create_{path}")
    def create_item(payload: schema, db: Database = Depends(get_db),
                    _: dict = Depends(get_current_admin)):
        return resource.create(db, payload)

    @router.put(f"/{path}/{{item_id}}", name=f"update_{path}")
    def update_item(item_id: str, payload: Dict[str, Any] = Body(...),
                    db: Database = Depends(get_db), _: dict = Depends(get_current_admin)):
        return resource.update(db, item_id, payload)

    @router.delete(f"/{path}/{{item_id}}", name=f"delete_{path}")
    def delete_item(item_id: str, db: Database = Depends(get_db),
                    _: dict = Depends(get_current_admin)):
        resource.delete(db, item_id)
        return {"success": True, "message": f"{resource.name} deleted successfully", "id": item_id}


# =====
# Stats
# =====

@router.get("/stats")
def get_stats(db: Database = Depends(get_db)):
    stats = {path: resource.count(db) for path, resource in COLLECTIONS.items()}
    stats["total"] = sum(stats.values())
    return stats


@router.get("/stats/engagement")
def get_engagement_stats(db: Database = Depends(get_db)):
    return blog.engagement_summary(db)


# ====
# Blog
# ====

@router.get("/blogs")
def list_blogs(published: Optional[bool] = Query(None), db: Database = Depends(get_db)):
    return blogs.list(db, {"published": published} if published is not None else None)


@router.post("/blogs/{post_id}/view", response_model=ViewResult)
def view_blog(post_id: str, db: Database = Depends(get_db)):
    return ViewResult(views=blog.increment_view(db, post_id))


@router.post("/blogs/{post_id}/like", response_model=LikeResult)
def like_blog(post_id: str, data: LikeRequest, db: Database = Depends(get_db)):
    result = blog.toggle_like(db, post_id, data.user_id)
    return LikeResult(**result)


@router.get("/blogs/{post_id}/related")
def related_blogs(post_id: str, db: Database = Depends(get_db)):
    return blog.related_posts(db, post_id)


@router.get("/blogs/{post_id}/comments", response_model=List[Comment])
def list_blog_comments(post_id: str, db: Database = Depends(get_db)):
    return blog.list_comments(db, post_id)


@router.post("/blogs/{post_id}/comments", response_model=Comment, status_code=201)
def add_blog_comment(post_id: str, comment: CommentCreate, db: Database = Depends(get_db)):
    return blog.add_comment(db, post_id, comment)


@router.delete("/blogs/{post_id}/comments/{comment_id}")
def delete_blog_comment(post_id: str, comment_id: str, db: Database = Depends(get_db),
                        _: dict = Depends(get_current_admin)):
    blog.delete_comment(db, post_id, comment_id)
    return {"success": True, "message": "Comment deleted successfully", "id": comment_id}


for _path, _resource in COLLECTIONS.items():
    register_collection(_path, _resource, with_list=_path != "blogs")


# ==========
# Singletons
# ==========

@router.get("/hero")
def get_hero(db: Database = Depends(get_db)):
    return hero.get(db)


@router.put("/hero")
def put_hero(payload: Dict[str, Any] = Body(...), db: Database = Depends(get_db),
             _: dict = Depends(get_current_admin)):
    doc, _created = hero.put(db, payload)
    return doc


@router.get("/about")
def get_about(db: Database = Depends(get_db)):
    return about.get(db)


@router.put("/about")
def put_about(payload: Dict[str, Any] = Body(...), db: Database = Depends(get_db),
              _: dict = Depends(get_current_admin)):
    doc, _created = about.put(db, payload)
    return doc


@router.get("/contact")
def get_contact(db: Database = Depends(get_db)):
    return contact.get(db)


@router.post("/contact")
def post_contact(response: Response, payload: Dict[str, Any] = Body(...),
                 db: Database = Depends(get_db), _: dict = Depends(get_current_admin)):
    doc, created = contact.put(db, payload)
    if created:
        response.status_code = 201
    return doc


@router.put("/contact")
def put_contact(payload: Dict[str, Any] = Body(...), db: Database = Depends(get_db),
                _: dict = Depends(get_current_admin)):
    doc, _created = contact.put(db, payload)
    return doc
