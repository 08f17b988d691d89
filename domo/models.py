"""Pydantic models mirroring the JSON resources of the Domo public API.

Every field is optional: the API may omit any of them, and an omitted field
stays ``None`` instead of taking a zero value. Field names are snake_case in
Python and camelCase on the wire.

``template()`` constructors return placeholder records used to seed the
interactive editor. They carry no meaning beyond that.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


def _now() -> datetime:
    return datetime.now(timezone.utc)


class DomoModel(BaseModel):
    """Base for every API record."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_wire(self) -> dict[str, Any]:
        """Dump to the JSON shape the API expects, leaving out unset fields."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


# ---------------------------------------------------------------------------
# Accounts
# ---------------------------------------------------------------------------


class Property(DomoModel):
    """A property an account type requires when creating an account."""

    name: str | None = None
    prompt: str | None = None
    regex: str | None = None
    required: bool | None = None


class AccountTemplate(DomoModel):
    """Describes the request used to create an account of a given type."""

    name: str | None = None
    title: str | None = None
    content_type: str | None = None
    method: str | None = None
    properties: list[Property] | None = None


class AccountType(DomoModel):
    id: str | None = None
    name: str | None = None
    properties: dict[str, str] | None = None
    templates: dict[str, AccountTemplate] | None = Field(default=None, alias="_templates")


class Account(DomoModel):
    """An account owned by, or shared with, the calling client."""

    id: str | None = None
    name: str | None = None
    valid: bool | None = None
    account_type: AccountType | None = Field(default=None, alias="type")

    @classmethod
    def template(cls, account_type: AccountType | None = None) -> Account:
        """Placeholder account, optionally pre-populated for ``account_type``.

        When the account type carries a ``default`` template, each property it
        lists is seeded as ``"TODO: <prompt>"`` so the user sees what to fill in.
        """
        account = cls(id="0", name="Account Name", valid=True)
        if account_type is None:
            return account

        seeded = account_type.model_copy(deep=True)
        default = (seeded.templates or {}).get("default")
        if default is not None:
            seeded.properties = {
                prop.name: f"TODO: {prop.prompt}"
                for prop in default.properties or []
                if prop.name is not None
            }
        account.account_type = seeded
        return account


# ---------------------------------------------------------------------------
# DataSets
# ---------------------------------------------------------------------------


class Owner(DomoModel):
    id: int | None = None
    name: str | None = None


class Column(DomoModel):
    name: str | None = None
    # STRING, DECIMAL, LONG, DOUBLE, DATE or DATETIME
    column_type: str | None = Field(default=None, alias="type")


class Schema(DomoModel):
    columns: list[Column] | None = None


class Filter(DomoModel):
    """A PDP policy filter on a single column."""

    column: str | None = None
    not_: bool | None = Field(default=None, alias="not")
    operator: str | None = None
    values: list[str] | None = None


class Policy(DomoModel):
    """A Personalized Data Permission policy attached to a DataSet."""

    id: int | None = None
    name: str | None = None
    policy_type: str | None = Field(default=None, alias="type")
    filters: list[Filter] | None = None
    users: list[int] | None = None
    groups: list[str] | None = None

    @classmethod
    def template(cls) -> Policy:
        return cls(
            id=0,
            name="Policy Name",
            policy_type="user | system",
            filters=[
                Filter(
                    column="Column to filter on",
                    not_=False,
                    operator="EQUALS",
                    values=["values in this column that match will apply"],
                )
            ],
            users=[27],
            groups=["15"],
        )


class DataSet(DomoModel):
    id: str | None = None
    name: str | None = None
    description: str | None = None
    owner: Owner | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    data_current_at: datetime | None = None
    data_schema: Schema | None = Field(default=None, alias="schema")
    pdp_enabled: bool | None = None
    policies: list[Policy] | None = None
    rows: int | None = None
    columns: int | None = None

    @classmethod
    def template(cls) -> DataSet:
        now = _now()
        return cls(
            id="UUID",
            name="DataSet Name",
            description="DataSet Description",
            owner=Owner(id=1234, name="DataSet Owner's Name"),
            created_at=now,
            updated_at=now,
            data_current_at=now,
            data_schema=Schema(
                columns=[
                    Column(
                        name="Column Name",
                        column_type="STRING | DECIMAL | LONG | DOUBLE | DATE | DATETIME",
                    )
                ]
            ),
            pdp_enabled=False,
            policies=[Policy.template()],
            rows=0,
            columns=0,
        )


class QueryMetadata(DomoModel):
    column_type: str | None = Field(default=None, alias="type")
    datasource_id: str | None = None
    max_length: int | None = None
    min_length: int | None = None
    period_index: int | None = None


class QueryResult(DomoModel):
    """Result set of a SQL query executed against a DataSet.

    Row cells are whatever the server sent: numbers, strings or null.
    """

    datasource: str | None = None
    columns: list[str] | None = None
    metadata: list[QueryMetadata] | None = None
    rows: list[list[Any]] | None = None
    num_rows: int | None = None
    num_columns: int | None = None
    from_cache: bool | None = None


# ---------------------------------------------------------------------------
# Groups
# ---------------------------------------------------------------------------


class Group(DomoModel):
    id: int | None = None
    name: str | None = None
    default: bool | None = None
    active: bool | None = None
    creator_id: str | None = None
    member_count: int | None = None

    @classmethod
    def template(cls) -> Group:
        return cls(
            id=0,
            name="Group Name",
            default=False,
            active=True,
            creator_id="0",
            member_count=0,
        )


# ---------------------------------------------------------------------------
# Pages
# ---------------------------------------------------------------------------


class Visibility(DomoModel):
    user_ids: list[int] | None = None
    group_ids: list[int] | None = None


class Page(DomoModel):
    id: int | None = None
    name: str | None = None
    parent_id: int | None = None
    owner_id: int | None = None
    locked: bool | None = None
    collection_ids: list[int] | None = None
    card_ids: list[int] | None = None
    children: list[Page] | None = None
    visibility: Visibility | None = None

    @classmethod
    def template(cls) -> Page:
        return cls(
            id=0,
            name="Page Name",
            parent_id=0,
            owner_id=0,
            locked=False,
            collection_ids=[1, 2, 3],
            card_ids=[1, 2, 3],
            children=[],
            visibility=Visibility(user_ids=[1, 2, 3], group_ids=[1, 2, 3]),
        )


class Collection(DomoModel):
    """A titled subset of the cards on a page."""

    id: int | None = None
    title: str | None = None
    description: str | None = None
    card_ids: list[int] | None = None

    @classmethod
    def template(cls) -> Collection:
        return cls(
            id=0,
            title="Collection Title",
            description="Collection Description",
            card_ids=[1, 2, 3],
        )


# ---------------------------------------------------------------------------
# Streams
# ---------------------------------------------------------------------------


class Stream(DomoModel):
    id: int | None = None
    created_at: datetime | None = None
    modified_at: datetime | None = None
    # APPEND, REPLACE or UPSERT
    update_method: str | None = None
    key_column_name: str | None = None
    dataset: DataSet | None = Field(default=None, alias="dataSet")
    deleted: bool | None = None

    @classmethod
    def template(cls) -> Stream:
        now = _now()
        return cls(
            id=0,
            created_at=now,
            modified_at=now,
            update_method="APPEND | REPLACE | UPSERT",
            key_column_name="Defines the key column used for UPSERT updates",
            dataset=DataSet.template(),
            deleted=False,
        )


class Execution(DomoModel):
    """One upload session against a stream."""

    id: int | None = None
    started_at: datetime | None = None
    current_state: str | None = None
    created_at: datetime | None = None
    modified_at: datetime | None = None


# ---------------------------------------------------------------------------
# Users
# ---------------------------------------------------------------------------


class User(DomoModel):
    id: int | None = None
    name: str | None = None
    email: str | None = None
    alternate_email: str | None = None
    employee_id: str | None = None
    employee_number: int | None = None
    title: str | None = None
    phone: str | None = None
    location: str | None = None
    department: str | None = None
    timezone: str | None = None
    locale: str | None = None
    role: str | None = None
    role_id: int | None = None
    deleted: bool | None = None

    @classmethod
    def template(cls) -> User:
        return cls(
            id=0,
            name="First Last",
            email="First.Last@company.com",
            alternate_email="first.last@gmail.com",
            employee_id="employee id",
            employee_number=0,
            title="Title",
            phone="+1 (800) 700-6000",
            location="CA",
            department="department",
            timezone="America/Los_Angeles",
            locale="en-US",
            role="Admin - Match roles defined in instance",
            role_id=0,
            deleted=False,
        )


# ---------------------------------------------------------------------------
# Workflow (projects and tasks)
# ---------------------------------------------------------------------------


class Project(DomoModel):
    id: str | None = None
    name: str | None = None
    description: str | None = None
    created_by: int | None = None
    created_date: datetime | None = None
    due_date: datetime | None = None
    public: bool | None = None
    members: list[int] | None = None

    @classmethod
    def template(cls) -> Project:
        now = _now()
        return cls(
            id="0",
            name="Project Name",
            description="Project Description",
            created_by=12345,
            created_date=now,
            due_date=now,
            public=True,
            members=[0, 1, 2, 3],
        )


class ProjectList(DomoModel):
    """A swim lane of tasks within a project."""

    id: int | None = None
    name: str | None = None
    # TODO, WORKING_ON, COMPLETED, ...
    list_type: str | None = Field(default=None, alias="type")
    index: int | None = None

    @classmethod
    def template(cls) -> ProjectList:
        return cls(id=0, name="List Name", list_type="", index=0)


class Task(DomoModel):
    id: int | None = None
    project_id: int | None = None
    project_list_id: int | None = None
    task_name: str | None = None
    description: str | None = None
    created_date: datetime | None = None
    due_date: datetime | None = None
    priority: int | None = None
    created_by: int | None = None
    owned_by: int | None = None
    contributors: list[int] | None = None
    attachment_count: int | None = None
    tags: list[str] | None = None
    archived: bool | None = None

    @classmethod
    def template(cls) -> Task:
        now = _now()
        return cls(
            id=0,
            project_id=0,
            project_list_id=0,
            task_name="Task Name",
            description="Task Description",
            created_date=now,
            due_date=now,
            priority=0,
            created_by=27,
            owned_by=27,
            contributors=[0, 1, 2, 3],
            attachment_count=0,
            tags=["A", "B", "C"],
            archived=False,
        )


class Attachment(DomoModel):
    id: int | None = None
    task_id: int | None = None
    created_date: datetime | None = None
    file_name: str | None = None
    mime_type: str | None = None


# ---------------------------------------------------------------------------
# Buzz
# ---------------------------------------------------------------------------


class Header(DomoModel):
    name: str | None = None
    value: str | None = None


class Integration(DomoModel):
    """A service outside Domo that receives Buzz events and posts messages back.

    ``scope`` is one of PUBLIC_CHANNELS, OWNER_ACCESS or CHANNEL_LIST;
    ``channel_ids`` is only meaningful for CHANNEL_LIST.
    """

    id: str | None = None
    name: str | None = None
    description: str | None = None
    scope: str | None = None
    channel_ids: list[str] | None = None
    headers: list[Header] | None = None

    @classmethod
    def template(cls) -> Integration:
        return cls(
            id="UUID",
            name="Integration Name",
            description="Integration Description",
            scope="PUBLIC_CHANNELS | OWNER_ACCESS | CHANNEL_LIST",
            channel_ids=[
                "CHANNEL-A ID for CHANNEL_LIST scope",
                "CHANNEL-B ID for CHANNEL_LIST scope",
                "CHANNEL-C ID for CHANNEL_LIST scope",
            ],
            headers=[
                Header(name="HeaderName", value="HeaderValue"),
                Header(name="x-my-api-key", value="ABC123"),
            ],
        )


class Subscription(DomoModel):
    """An event subscription of a Buzz integration.

    ``event_type`` is one of MESSAGE_POSTED, SLASH_COMMAND, THREAD_CREATED,
    USERS_JOINED_CHANNEL or USERS_LEFT_CHANNEL.
    """

    id: str | None = None
    event_type: str | None = None
    url: str | None = None
    slash_command: str | None = None

    @classmethod
    def template(cls) -> Subscription:
        return cls(
            id="UUID",
            event_type=(
                "MESSAGE_POSTED | SLASH_COMMAND | THREAD_CREATED"
                " | USERS_JOINED_CHANNEL | USERS_LEFT_CHANNEL"
            ),
            url="The integration will post to this URL when an event occurs",
            slash_command="Required if and only if eventType is SLASH_COMMAND",
        )


class BuzzUser(DomoModel):
    id: int | None = None
    display_name: str | None = None
    email: str | None = None


class Message(DomoModel):
    id: str | None = None
    text: str | None = None


class Channel(DomoModel):
    id: str | None = None
    parent_id: str | None = None
    title: str | None = None


class Organization(DomoModel):
    domain: str | None = None


class Callback(DomoModel):
    """Where an integration may post a reply. Expires an hour after the event."""

    url: str | None = None
    headers: dict[str, str] | None = None


class EventDetail(DomoModel):
    event_type: str | None = Field(default=None, alias="type")


class Event(DomoModel):
    """Payload Buzz POSTs to an integration when a subscribed event occurs."""

    author: BuzzUser | None = None
    thread: Channel | None = None
    message: Message | None = None
    users: list[BuzzUser] | None = None
    event: EventDetail | None = None
    owner: BuzzUser | None = None
    organization: Organization | None = None
    channel: Channel | None = None
    callback: Callback | None = None


class BuzzMessage(DomoModel):
    """A message posted through a Buzz incoming webhook."""

    title: str | None = None
    text: str | None = None


# ---------------------------------------------------------------------------
# Activity log
# ---------------------------------------------------------------------------


class LogEntry(DomoModel):
    user_name: str | None = None
    user_id: str | None = None
    user_type: str | None = None
    actor_id: int | None = None
    actor_type: str | None = None
    object_name: str | None = None
    object_id: str | None = None
    object_type: str | None = None
    additional_comment: str | None = None
    time: datetime | None = None
    event_text: str | None = None
    device: str | None = None
    browser_details: str | None = None
    ip_address: str | None = None


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------


class ErrorBody(DomoModel):
    """Body of a non-2xx API response."""

    status: int | None = None
    status_reason: str | None = None
    message: str | None = None
    path: str | None = None
    toe: str | None = None
