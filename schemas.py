"""
Database Schemas for the Portfolio CMS

Each Pydantic model = one MongoDB collection. Documents are stored and
returned with camelCase keys (``liveUrl``, ``readTime``); Python code uses
the snake_case attribute names.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# Auth
class LoginRequest(BaseModel):
    email: str
    password: str


class AdminIdentity(BaseModel):
    email: str
    role: str = "admin"


class LoginResponse(CamelModel):
    success: bool = True
    token: str
    token_type: str = "bearer"
    user: AdminIdentity


# Content
class CaseStudy(CamelModel):
    problem: str = ""
    approach: str = ""
    impact: str = ""


class Project(CamelModel):
    title: str = Field(..., min_length=1)
    subtitle: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    tech: List[str] = []
    date: Optional[str] = None
    live_url: Optional[str] = None
    github_url: Optional[str] = None
    highlights: List[str] = []
    featured: bool = False
    bg_image: Optional[str] = None
    case_study: CaseStudy = Field(default_factory=CaseStudy)
    order: int = 0


class Skill(CamelModel):
    name: str = Field(..., min_length=1)
    level: int = Field(..., ge=0, le=100)
    category: str = Field(..., min_length=1)
    order: int = 0


class Education(CamelModel):
    institution: str = Field(..., min_length=1)
    degree: str = Field(..., min_length=1)
    location: Optional[str] = None
    period: Optional[str] = None
    gpa: Optional[str] = None
    description: Optional[str] = None
    achievements: List[str] = []
    current: bool = False
    logo_path: Optional[str] = None
    order: int = 0


class Blog(CamelModel):
    """Admin-editable blog fields; engagement fields are server-managed."""
    title: str = Field(..., min_length=1)
    excerpt: str = Field(..., min_length=1)
    content: str = ""
    image: Optional[str] = None
    leetcode_image: Optional[str] = None
    date: Optional[str] = None
    category: Optional[str] = None
    tags: List[str] = []
    read_time: Optional[str] = None
    published: bool = True
    featured: bool = False
    order: int = 0


class Leadership(CamelModel):
    title: str = Field(..., min_length=1)
    organization: str = Field(..., min_length=1)
    period: Optional[str] = None
    description: Optional[str] = None
    achievements: List[str] = []
    order: int = 0


class Achievement(CamelModel):
    title: str = Field(..., min_length=1)
    description: Optional[str] = None
    category: Optional[str] = None
    date: Optional[str] = None
    order: int = 0


# Singletons
class Hero(CamelModel):
    name: str = ""
    title: str = ""
    subtitle: str = ""
    description: str = ""
    tagline: str = ""


class About(CamelModel):
    title: str = ""
    description: str = ""
    highlights: List[str] = []


class Contact(CamelModel):
    email: str = ""
    phone: str = ""
    location: str = ""
    linkedin: str = ""
    github: str = ""
    leetcode: str = ""
    portfolio: str = ""
    message: str = ""


# Blog engagement
class CommentCreate(CamelModel):
    author: str = Field(..., min_length=1, max_length=80)
    email: Optional[EmailStr] = None
    content: str = Field(..., min_length=1, max_length=2000)

    @field_validator("author", "content")
    @classmethod
    def strip_text(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("must not be blank")
        return v

    @field_validator("email", mode="before")
    @classmethod
    def blank_email_is_none(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v


class Comment(CamelModel):
    id: str
    author: str
    email: Optional[str] = None
    content: str
    created_at: datetime
    approved: bool = True


class LikeRequest(CamelModel):
    user_id: str = Field(..., min_length=1, max_length=128)


class LikeResult(CamelModel):
    likes: int
    has_liked: bool


class ViewResult(CamelModel):
    views: int
