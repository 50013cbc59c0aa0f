"""GraphQL enum values used on the wire."""

from enum import Enum


class FeedTypes(str, Enum):
    CALENDAR = "CALENDAR"
    DISCORD = "DISCORD"
    EMAIL = "EMAIL"
    ISSUE = "ISSUE"
    MICROSOFT_TEAMS = "MICROSOFT_TEAMS"
    NOTION = "NOTION"
    REDDIT = "REDDIT"
    RSS = "RSS"
    SITE = "SITE"
    SLACK = "SLACK"
    TWITTER = "TWITTER"
    WEB = "WEB"


class FeedServiceTypes(str, Enum):
    ATLASSIAN_JIRA = "ATLASSIAN_JIRA"
    BOX = "BOX"
    DROPBOX = "DROPBOX"
    GIT_HUB = "GIT_HUB"
    GIT_HUB_ISSUES = "GIT_HUB_ISSUES"
    GOOGLE_CALENDAR = "GOOGLE_CALENDAR"
    GOOGLE_DRIVE = "GOOGLE_DRIVE"
    GOOGLE_EMAIL = "GOOGLE_EMAIL"
    LINEAR = "LINEAR"
    MICROSOFT_CALENDAR = "MICROSOFT_CALENDAR"
    MICROSOFT_EMAIL = "MICROSOFT_EMAIL"
    ONE_DRIVE = "ONE_DRIVE"
    SHARE_POINT = "SHARE_POINT"


class FeedListingTypes(str, Enum):
    NEW = "NEW"
    PAST = "PAST"


class TwitterListingTypes(str, Enum):
    POSTS = "POSTS"
    RECENT_SEARCH = "RECENT_SEARCH"


class NotionTypes(str, Enum):
    DATABASE = "DATABASE"
    PAGE = "PAGE"


class SharePointAuthenticationTypes(str, Enum):
    APPLICATION = "APPLICATION"
    USER = "USER"


class GoogleDriveAuthenticationTypes(str, Enum):
    SERVICE_ACCOUNT = "SERVICE_ACCOUNT"
    USER = "USER"


class TimedPolicyRecurrenceTypes(str, Enum):
    ONCE = "ONCE"
    REPEAT = "REPEAT"


class ContentTypes(str, Enum):
    EMAIL = "EMAIL"
    EVENT = "EVENT"
    FILE = "FILE"
    ISSUE = "ISSUE"
    MEMORY = "MEMORY"
    MESSAGE = "MESSAGE"
    PAGE = "PAGE"
    POST = "POST"
    TEXT = "TEXT"


class FileTypes(str, Enum):
    ANIMATION = "ANIMATION"
    AUDIO = "AUDIO"
    CODE = "CODE"
    DATA = "DATA"
    DOCUMENT = "DOCUMENT"
    DRAWING = "DRAWING"
    EMAIL = "EMAIL"
    GEOMETRY = "GEOMETRY"
    IMAGE = "IMAGE"
    PACKAGE = "PACKAGE"
    POINT_CLOUD = "POINT_CLOUD"
    SHAPE = "SHAPE"
    UNKNOWN = "UNKNOWN"
    VIDEO = "VIDEO"


class SearchTypes(str, Enum):
    HYBRID = "HYBRID"
    KEYWORD = "KEYWORD"
    VECTOR = "VECTOR"


class TextTypes(str, Enum):
    HTML = "HTML"
    MARKDOWN = "MARKDOWN"
    PLAIN = "PLAIN"


class SearchServiceTypes(str, Enum):
    EXA = "EXA"
    EXA_CODE = "EXA_CODE"
    PODSCAN = "PODSCAN"
    TAVILY = "TAVILY"


class ModelServiceTypes(str, Enum):
    ANTHROPIC = "ANTHROPIC"
    GOOGLE = "GOOGLE"
    OPEN_AI = "OPEN_AI"


class SpecificationTypes(str, Enum):
    COMPLETION = "COMPLETION"
    EXTRACTION = "EXTRACTION"
    PREPARATION = "PREPARATION"


class IntegrationServiceTypes(str, Enum):
    EMAIL = "EMAIL"
    SLACK = "SLACK"
    TWITTER = "TWITTER"
    WEB_HOOK = "WEB_HOOK"


def values(enum_type: type[Enum]) -> list[str]:
    """Wire values of an enum, in declaration order."""
    return [member.value for member in enum_type]
