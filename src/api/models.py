"""Pydantic models for API request/response.

Field names are snake_case in Python and camelCase on the wire.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class MessageResponse(CamelModel):
    message: str
    id: Optional[str] = None


# ── prayer requests ──────────────────────────────────────────

class PrayerRequestCreate(CamelModel):
    """Request model for a public prayer request.

    Required fields are optional here so that absence is reported together
    with the other missing fields instead of as a type error.
    """
    name: Optional[str] = None
    email: Optional[EmailStr] = None
    prayer_request: Optional[str] = None
    is_private: Optional[bool] = None


class PrayerRequestUpdate(CamelModel):
    is_answered: bool = True


class PrayerRequestResponse(CamelModel):
    id: str
    name: str
    email: Optional[str] = None
    prayer_request: str
    is_private: bool
    is_answered: bool
    answered_at: Optional[datetime] = None
    created_at: datetime


class PrayerRequestListResponse(CamelModel):
    prayer_requests: list[PrayerRequestResponse]
    current_page: int
    total_pages: int
    total: int


# ── events ───────────────────────────────────────────────────

class CreatorRef(CamelModel):
    id: str
    name: Optional[str] = None


class EventResponse(CamelModel):
    """Public view of an event; attendee details are never exposed."""
    id: str
    title: str
    description: str
    date: datetime
    time: str
    location: str
    category: str
    is_recurring: bool
    recurring_type: Optional[str] = None
    max_attendees: Optional[int] = None
    registered_count: int = Field(0, description="Number of registered attendees")
    image: Optional[str] = None
    created_by: CreatorRef
    created_at: datetime


class EventRegistrationRequest(CamelModel):
    name: Optional[str] = None
    email: Optional[EmailStr] = None
    phone: Optional[str] = None


# ── contact ──────────────────────────────────────────────────

class ContactMessageCreate(CamelModel):
    name: Optional[str] = None
    email: Optional[EmailStr] = None
    phone: Optional[str] = None
    subject: Optional[str] = None
    message: Optional[str] = None


class ContactMessageUpdate(CamelModel):
    is_read: bool = True


class ContactMessageResponse(CamelModel):
    id: str
    name: str
    email: str
    phone: Optional[str] = None
    subject: str
    message: str
    is_read: bool
    responded_at: Optional[datetime] = None
    created_at: datetime


class ContactMessageListResponse(CamelModel):
    messages: list[ContactMessageResponse]
    current_page: int
    total_pages: int
    total: int


# ── newsletter ───────────────────────────────────────────────

class NewsletterSubscribeRequest(CamelModel):
    email: Optional[EmailStr] = None
    name: Optional[str] = None


class NewsletterUnsubscribeRequest(CamelModel):
    email: Optional[EmailStr] = None


class NewsletterSubscriptionResponse(CamelModel):
    id: str
    email: str
    name: Optional[str] = None
    is_active: bool
    subscribed_at: datetime
    unsubscribed_at: Optional[datetime] = None


class NewsletterResponse(CamelModel):
    message: str
    subscription: NewsletterSubscriptionResponse


# ── sermons ──────────────────────────────────────────────────

class SermonCreate(CamelModel):
    title: Optional[str] = None
    speaker: Optional[str] = None
    date: Optional[datetime] = None
    scripture: Optional[str] = None
    summary: Optional[str] = None
    audio_url: Optional[str] = None
    video_url: Optional[str] = None
    notes: Optional[str] = None
    series: Optional[str] = None
    tags: list[str] = Field(default_factory=list)


class SermonResponse(CamelModel):
    id: str
    title: str
    speaker: str
    date: datetime
    scripture: Optional[str] = None
    summary: Optional[str] = None
    audio_url: Optional[str] = None
    video_url: Optional[str] = None
    notes: Optional[str] = None
    series: Optional[str] = None
    tags: list[str] = Field(default_factory=list)
    view_count: int = 0
    created_at: datetime


class SermonListResponse(CamelModel):
    sermons: list[SermonResponse]
    current_page: int
    total_pages: int
    total: int


# ── auth ─────────────────────────────────────────────────────

class RegisterRequest(CamelModel):
    """Request model for staff account creation."""
    name: Optional[str] = None
    email: Optional[EmailStr] = None
    password: Optional[str] = None
    role: Optional[str] = None
    phone: Optional[str] = None
    department: Optional[str] = None


class LoginRequest(CamelModel):
    email: Optional[str] = None
    password: Optional[str] = None


class UserSummary(CamelModel):
    id: str
    name: str
    email: str
    role: str


class LoginResponse(CamelModel):
    token: str
    user: UserSummary


class UserResponse(CamelModel):
    """Stored user without credentials."""
    id: str
    name: str
    email: str
    role: str
    phone: Optional[str] = None
    department: Optional[str] = None
    is_active: bool
    last_login: Optional[datetime] = None
    created_at: datetime


# ── dashboard ────────────────────────────────────────────────

class DashboardCountsResponse(CamelModel):
    total_prayer_requests: int
    answered_prayers: int
    upcoming_events: int
    total_messages: int
    newsletter_subscribers: int
    total_sermons: int


class RecentPrayerRequest(CamelModel):
    id: str
    name: str
    prayer_request: str
    created_at: datetime


class RecentMessage(CamelModel):
    id: str
    name: str
    subject: str
    created_at: datetime
    is_read: bool


class DashboardStatsResponse(CamelModel):
    stats: DashboardCountsResponse
    recent_prayer_requests: list[RecentPrayerRequest]
    recent_messages: list[RecentMessage]
