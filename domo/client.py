"""HTTP client for the Domo public API.

Every method fetches a fresh access token for its scope, sends exactly one
request and maps the response. Nothing is cached or retried.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, TypeVar

import requests
from pydantic import BaseModel, StrictInt, TypeAdapter, ValidationError

from .errors import DomoAPIError, DomoPreconditionError, DomoResponseError
from .models import (
    Account,
    AccountType,
    Attachment,
    Collection,
    DataSet,
    DomoModel,
    ErrorBody,
    Execution,
    Group,
    Integration,
    LogEntry,
    Page,
    Policy,
    Project,
    ProjectList,
    QueryResult,
    Stream,
    Subscription,
    Task,
    User,
)
from .pagination import fetch_all

logger = logging.getLogger(__name__)

DEFAULT_HOST = "https://api.domo.com"
API_VERSION = "/v1"

M = TypeVar("M", bound=BaseModel)


@dataclass(frozen=True)
class ClientConfig:
    """Connection settings, fixed for the lifetime of a client."""

    client_id: str
    client_secret: str
    host: str = DEFAULT_HOST


def _is_success(response: requests.Response) -> bool:
    return 200 <= response.status_code < 300


def _decode_json(response: requests.Response) -> Any:
    try:
        return response.json()
    except ValueError as exc:
        raise DomoResponseError(
            f"Failed to decode JSON response: {exc}",
            response.text,
            status=response.status_code,
        ) from exc


def raise_for_api_error(response: requests.Response) -> None:
    """Raise ``DomoAPIError`` when ``response`` is not a 2xx.

    The platform is not consistent about which status it uses for what, so
    the only distinction made is success versus failure.
    """
    if _is_success(response):
        return
    try:
        payload = response.json()
        body = ErrorBody.model_validate(payload)
    except (ValueError, ValidationError) as exc:
        raise DomoResponseError(
            f"Failed to decode error response (HTTP {response.status_code})",
            response.text,
            status=response.status_code,
        ) from exc
    raise DomoAPIError(
        body.message or response.reason or "Unknown error",
        status=body.status if body.status is not None else response.status_code,
        status_reason=body.status_reason,
        path=body.path,
        error_type=body.toe,
    )


def _parse(model: type[M], payload: Any) -> M:
    try:
        return model.model_validate(payload)
    except ValidationError as exc:
        raise DomoResponseError(
            f"Unexpected {model.__name__} response: {exc}", json.dumps(payload, default=str)
        ) from exc


def _parse_list(model: type[M], payload: Any) -> list[M]:
    if not isinstance(payload, list):
        raise DomoResponseError(
            f"Expected a list of {model.__name__}, got {type(payload).__name__}",
            json.dumps(payload, default=str),
        )
    return [_parse(model, item) for item in payload]


_IDS = TypeAdapter(list[StrictInt])


def _parse_ids(payload: Any) -> list[int]:
    try:
        return _IDS.validate_python(payload)
    except ValidationError as exc:
        raise DomoResponseError(
            f"Expected a list of ids: {exc}", json.dumps(payload, default=str)
        ) from exc


class _ShareUser(BaseModel):
    id: int


class _Share(BaseModel):
    user: _ShareUser


class _QueryRequest(BaseModel):
    sql: str


class _IntegrationList(BaseModel):
    integrations: list[Integration] = []


class _SubscriptionList(BaseModel):
    subscriptions: list[Subscription] = []


class Domo:
    """Client for the Domo public API.

    Args:
        config: Host and client credentials.
        session: Optional ``requests.Session`` to send requests through.
    """

    def __init__(self, config: ClientConfig, session: requests.Session | None = None) -> None:
        self.config = config
        self.session = session or requests.Session()

    # ------------------------------------------------------------------
    # Transport
    # ------------------------------------------------------------------

    def get_access_token(self, scope: str) -> str:
        """Exchange the client credentials for a bearer token scoped to ``scope``.

        Returns the value for the ``Authorization`` header, ``"Bearer <token>"``.
        """
        logger.debug("Requesting access token for scope %r", scope)
        response = self.session.get(
            f"{self.config.host}/oauth/token",
            params={"grant_type": "client_credentials", "scope": scope},
            auth=(self.config.client_id, self.config.client_secret),
        )
        raise_for_api_error(response)
        data = _decode_json(response)
        token = data.get("access_token") if isinstance(data, dict) else None
        if not token:
            raise DomoResponseError(
                "Token response did not contain 'access_token'",
                response.text,
                status=response.status_code,
            )
        return f"Bearer {token}"

    def _request(
        self,
        method: str,
        scope: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        json: Any = None,
        data: str | bytes | None = None,
        headers: dict[str, str] | None = None,
        files: dict[str, Any] | None = None,
    ) -> requests.Response:
        token = self.get_access_token(scope)
        request_headers = {"Authorization": token}
        if headers:
            request_headers.update(headers)
        if params:
            params = {k: v for k, v in params.items() if v is not None}
        url = f"{self.config.host}{API_VERSION}{path}"
        logger.debug("%s %s%s", method, API_VERSION, path)
        response = self.session.request(
            method,
            url,
            params=params or None,
            json=json,
            data=data,
            headers=request_headers,
            files=files,
        )
        logger.info("%s %s%s -> %d", method, API_VERSION, path, response.status_code)
        raise_for_api_error(response)
        return response

    def _get(self, scope: str, path: str, params: dict[str, Any] | None = None) -> Any:
        return _decode_json(self._request("GET", scope, path, params=params))

    def _send(self, method: str, scope: str, path: str, body: Any = None) -> Any:
        """Send a JSON body and decode the JSON answer."""
        if isinstance(body, DomoModel):
            body = body.to_wire()
        elif isinstance(body, BaseModel):
            body = body.model_dump(mode="json")
        return _decode_json(self._request(method, scope, path, json=body))

    def _send_no_content(self, method: str, scope: str, path: str, body: Any = None) -> None:
        if isinstance(body, DomoModel):
            body = body.to_wire()
        elif isinstance(body, BaseModel):
            body = body.model_dump(mode="json")
        self._request(method, scope, path, json=body)

    # ------------------------------------------------------------------
    # Accounts
    # ------------------------------------------------------------------

    def get_accounts(self, limit: int | None = None, offset: int | None = None) -> list[Account]:
        """List the accounts the client owns or that were shared with it."""
        data = self._get("account", "/accounts", {"limit": limit, "offset": offset})
        return _parse_list(Account, data)

    def create_account(self, account: Account) -> Account:
        """Create an account. The response omits the account type properties."""
        return _parse(Account, self._send("POST", "account", "/accounts", account))

    def get_account(self, account_id: str) -> Account:
        return _parse(Account, self._get("account", f"/accounts/{account_id}"))

    def update_account(self, account_id: str, account: Account) -> None:
        """Update an account's metadata and type properties.

        The API answers with the updated account but this method returns
        nothing; callers re-fetch if they need the new state.
        """
        self._send_no_content("PATCH", "account", f"/accounts/{account_id}", account)

    def delete_account(self, account_id: str) -> None:
        self._request("DELETE", "account", f"/accounts/{account_id}")

    def share_account(self, account_id: str, user_id: int) -> None:
        body = _Share(user=_ShareUser(id=user_id))
        self._send_no_content("POST", "account", f"/accounts/{account_id}/shares", body)

    def get_account_types(
        self, limit: int | None = None, offset: int | None = None
    ) -> list[AccountType]:
        data = self._get("account", "/account-types", {"limit": limit, "offset": offset})
        return _parse_list(AccountType, data)

    def get_account_type(self, account_type_id: str) -> AccountType:
        """Fetch an account type including the properties needed to create one."""
        return _parse(AccountType, self._get("account", f"/account-types/{account_type_id}"))

    def account_template(self, account_type_id: str) -> Account:
        """Build an editable account whose type properties are pre-seeded.

        Accounts returned by the API never include type properties, so the
        type is fetched separately and its ``default`` template expanded.
        """
        return Account.template(self.get_account_type(account_type_id))

    # ------------------------------------------------------------------
    # Activity log
    # ------------------------------------------------------------------

    def get_activity_log(
        self,
        start: int,
        end: int | None = None,
        user_id: int | None = None,
        limit: int | None = None,
        offset: int | None = None,
    ) -> list[LogEntry]:
        """Fetch activity log entries. ``start`` and ``end`` are epoch milliseconds."""
        params = {
            "user": user_id,
            "start": start,
            "end": end,
            "limit": limit,
            "offset": offset,
        }
        return _parse_list(LogEntry, self._get("audit", "/audit", params))

    # ------------------------------------------------------------------
    # Buzz integrations
    # ------------------------------------------------------------------

    def get_integrations(self) -> list[Integration]:
        data = self._get("buzz", "/buzz/integrations")
        return _parse(_IntegrationList, data).integrations

    def create_integration(self, integration: Integration) -> Integration:
        return _parse(Integration, self._send("POST", "buzz", "/buzz/integrations", integration))

    def get_integration(self, integration_id: str) -> Integration:
        return _parse(Integration, self._get("buzz", f"/buzz/integrations/{integration_id}"))

    def delete_integration(self, integration_id: str) -> None:
        self._request("DELETE", "buzz", f"/buzz/integrations/{integration_id}")

    def get_integration_subscriptions(self, integration_id: str) -> list[Subscription]:
        data = self._get("buzz", f"/buzz/integrations/{integration_id}/subscriptions")
        return _parse(_SubscriptionList, data).subscriptions

    def create_integration_subscription(
        self, integration_id: str, subscription: Subscription
    ) -> Subscription:
        path = f"/buzz/integrations/{integration_id}/subscriptions"
        return _parse(Subscription, self._send("POST", "buzz", path, subscription))

    def delete_integration_subscription(self, integration_id: str, subscription_id: str) -> None:
        path = f"/buzz/integrations/{integration_id}/subscriptions/{subscription_id}"
        self._request("DELETE", "buzz", path)

    # ------------------------------------------------------------------
    # DataSets
    # ------------------------------------------------------------------

    def get_datasets(self, limit: int | None = None, offset: int | None = None) -> list[DataSet]:
        data = self._get("data", "/datasets", {"limit": limit, "offset": offset})
        return _parse_list(DataSet, data)

    def get_all_datasets(self) -> list[DataSet]:
        return fetch_all(lambda limit, offset: self.get_datasets(limit=limit, offset=offset))

    def create_dataset(self, dataset: DataSet) -> DataSet:
        return _parse(DataSet, self._send("POST", "data", "/datasets", dataset))

    def get_dataset(self, dataset_id: str) -> DataSet:
        return _parse(DataSet, self._get("data", f"/datasets/{dataset_id}"))

    def update_dataset(self, dataset_id: str, dataset: DataSet) -> DataSet:
        return _parse(DataSet, self._send("PUT", "data", f"/datasets/{dataset_id}", dataset))

    def delete_dataset(self, dataset_id: str) -> None:
        self._request("DELETE", "data", f"/datasets/{dataset_id}")

    def export_dataset(self, dataset_id: str) -> str:
        """Export a DataSet's rows as CSV text, header row included."""
        response = self._request(
            "GET", "data", f"/datasets/{dataset_id}/data", params={"includeHeader": "true"}
        )
        return response.text

    def import_dataset(self, dataset_id: str, csv_text: str) -> None:
        """Replace all data in a DataSet with ``csv_text`` (RFC 4180)."""
        self._request(
            "PUT",
            "data",
            f"/datasets/{dataset_id}/data",
            data=csv_text.encode("utf-8"),
            headers={"Content-Type": "text/csv"},
        )

    def query_dataset(self, dataset_id: str, sql: str) -> QueryResult:
        path = f"/datasets/query/execute/{dataset_id}"
        return _parse(QueryResult, self._send("POST", "data", path, _QueryRequest(sql=sql)))

    def get_dataset_policies(self, dataset_id: str) -> list[Policy]:
        return _parse_list(Policy, self._get("data", f"/datasets/{dataset_id}/policies"))

    def create_dataset_policy(self, dataset_id: str, policy: Policy) -> Policy:
        path = f"/datasets/{dataset_id}/policies"
        return _parse(Policy, self._send("POST", "data", path, policy))

    def get_dataset_policy(self, dataset_id: str, policy_id: int) -> Policy:
        return _parse(Policy, self._get("data", f"/datasets/{dataset_id}/policies/{policy_id}"))

    def update_dataset_policy(self, dataset_id: str, policy_id: int, policy: Policy) -> Policy:
        path = f"/datasets/{dataset_id}/policies/{policy_id}"
        return _parse(Policy, self._send("PUT", "data", path, policy))

    def delete_dataset_policy(self, dataset_id: str, policy_id: int) -> None:
        self._request("DELETE", "data", f"/datasets/{dataset_id}/policies/{policy_id}")

    # ------------------------------------------------------------------
    # Groups
    # ------------------------------------------------------------------

    def get_groups(self, limit: int | None = None, offset: int | None = None) -> list[Group]:
        data = self._get("user", "/groups", {"limit": limit, "offset": offset})
        return _parse_list(Group, data)

    def create_group(self, group: Group) -> Group:
        return _parse(Group, self._send("POST", "user", "/groups", group))

    def get_group(self, group_id: str) -> Group:
        return _parse(Group, self._get("user", f"/groups/{group_id}"))

    def update_group(self, group_id: str, group: Group) -> Group:
        return _parse(Group, self._send("PUT", "user", f"/groups/{group_id}", group))

    def delete_group(self, group_id: str) -> None:
        self._request("DELETE", "user", f"/groups/{group_id}")

    def get_group_users(self, group_id: str) -> list[int]:
        """Return the ids of the users in a group."""
        return _parse_ids(self._get("user", f"/groups/{group_id}/users"))

    def add_group_user(self, group_id: str, user_id: str) -> None:
        self._request("PUT", "user", f"/groups/{group_id}/users/{user_id}")

    def remove_group_user(self, group_id: str, user_id: str) -> None:
        self._request("DELETE", "user", f"/groups/{group_id}/users/{user_id}")

    # ------------------------------------------------------------------
    # Pages
    # ------------------------------------------------------------------

    def get_pages(self, limit: int | None = None, offset: int | None = None) -> list[Page]:
        data = self._get("dashboard", "/pages", {"limit": limit, "offset": offset})
        return _parse_list(Page, data)

    def create_page(self, page: Page) -> Page:
        return _parse(Page, self._send("POST", "dashboard", "/pages", page))

    def get_page(self, page_id: int) -> Page:
        return _parse(Page, self._get("dashboard", f"/pages/{page_id}"))

    def update_page(self, page_id: int, page: Page) -> Page:
        """Update a page. Collections can only be reordered here, not added or removed."""
        return _parse(Page, self._send("PUT", "dashboard", f"/pages/{page_id}", page))

    def delete_page(self, page_id: int) -> None:
        self._request("DELETE", "dashboard", f"/pages/{page_id}")

    def get_page_collections(self, page_id: int) -> list[Collection]:
        return _parse_list(Collection, self._get("dashboard", f"/pages/{page_id}/collections"))

    def find_page_collection(self, page_id: int, collection_id: int) -> Collection:
        """Look up one collection on a page.

        The API has no endpoint for a single collection, so every collection on
        the page is listed and scanned.

        Raises:
            DomoPreconditionError: no collection on the page has ``collection_id``.
        """
        for collection in self.get_page_collections(page_id):
            if collection.id == collection_id:
                return collection
        raise DomoPreconditionError(
            f"Invalid collection id {collection_id} for page {page_id}"
        )

    def create_page_collection(self, page_id: int, collection: Collection) -> Collection:
        path = f"/pages/{page_id}/collections"
        return _parse(Collection, self._send("POST", "dashboard", path, collection))

    def update_page_collection(
        self, page_id: int, collection_id: int, collection: Collection
    ) -> None:
        path = f"/pages/{page_id}/collections/{collection_id}"
        self._send_no_content("PUT", "dashboard", path, collection)

    def delete_page_collection(self, page_id: int, collection_id: int) -> None:
        self._request("DELETE", "dashboard", f"/pages/{page_id}/collections/{collection_id}")

    # ------------------------------------------------------------------
    # Streams
    # ------------------------------------------------------------------

    def get_streams(self, limit: int | None = None, offset: int | None = None) -> list[Stream]:
        """List streams. The server defaults to 50 per page and allows up to 500."""
        data = self._get("data", "/streams", {"limit": limit, "offset": offset})
        return _parse_list(Stream, data)

    def get_all_streams(self) -> list[Stream]:
        return fetch_all(lambda limit, offset: self.get_streams(limit=limit, offset=offset))

    def search_streams_by_dataset(self, dataset_id: str) -> list[Stream]:
        data = self._get("data", "/streams/search", {"q": f"dataSource.id:{dataset_id}"})
        return _parse_list(Stream, data)

    def search_streams_by_owner(self, owner_id: str) -> list[Stream]:
        data = self._get("data", "/streams/search", {"q": f"dataSource.owner.id:{owner_id}"})
        return _parse_list(Stream, data)

    def create_stream(self, stream: Stream) -> Stream:
        """Create a stream together with the DataSet it feeds."""
        return _parse(Stream, self._send("POST", "data", "/streams", stream))

    def get_stream(self, stream_id: str) -> Stream:
        return _parse(Stream, self._get("data", f"/streams/{stream_id}"))

    def update_stream(self, stream_id: str, stream: Stream) -> Stream:
        return _parse(Stream, self._send("PATCH", "data", f"/streams/{stream_id}", stream))

    def delete_stream(self, stream_id: str) -> None:
        """Delete a stream. The associated DataSet is kept."""
        self._request("DELETE", "data", f"/streams/{stream_id}")

    def get_stream_executions(
        self, stream_id: str, limit: int | None = None, offset: int | None = None
    ) -> list[Execution]:
        path = f"/streams/{stream_id}/executions"
        return _parse_list(Execution, self._get("data", path, {"limit": limit, "offset": offset}))

    def create_stream_execution(self, stream_id: str) -> Execution:
        """Open an execution. Any other execution on the stream is aborted."""
        path = f"/streams/{stream_id}/executions"
        return _parse(Execution, self._send("POST", "data", path, {}))

    def get_stream_execution(self, stream_id: str, execution_id: str) -> Execution:
        path = f"/streams/{stream_id}/executions/{execution_id}"
        return _parse(Execution, self._get("data", path))

    def upload_stream_part(
        self, stream_id: str, execution_id: str, part_id: str, csv_text: str
    ) -> Execution:
        """Upload one CSV part of an execution.

        Part ids must increase in the order the data should be assembled.
        Uploading the same part id again replaces it, so a failed part can be
        retried; every part has to be present before the commit.
        """
        path = f"/streams/{stream_id}/executions/{execution_id}/part/{part_id}"
        response = self._request(
            "PUT",
            "data",
            path,
            data=csv_text.encode("utf-8"),
            headers={"Content-Type": "text/csv"},
        )
        return _parse(Execution, _decode_json(response))

    def commit_stream_execution(self, stream_id: str, execution_id: str) -> Execution:
        """Commit the uploaded parts.

        The server allows one commit per stream every 15 minutes; an early
        commit fails like any other API error.
        """
        path = f"/streams/{stream_id}/executions/{execution_id}/commit"
        return _parse(Execution, _decode_json(self._request("PUT", "data", path)))

    def abort_stream_execution(self, stream_id: str, execution_id: str) -> None:
        self._request("PUT", "data", f"/streams/{stream_id}/executions/{execution_id}/abort")

    # ------------------------------------------------------------------
    # Users
    # ------------------------------------------------------------------

    def get_users(self, limit: int | None = None, offset: int | None = None) -> list[User]:
        data = self._get("user", "/users", {"limit": limit, "offset": offset})
        return _parse_list(User, data)

    def get_all_users(self) -> list[User]:
        return fetch_all(lambda limit, offset: self.get_users(limit=limit, offset=offset))

    def get_users_by_email(self, emails: list[str]) -> list[User]:
        return _parse_list(User, self._send("POST", "user", "/users/bulk/emails", list(emails)))

    def create_user(self, user: User) -> User:
        return _parse(User, self._send("POST", "user", "/users", user))

    def get_user(self, user_id: str) -> User:
        return _parse(User, self._get("user", f"/users/{user_id}"))

    def update_user(self, user_id: str, user: User) -> User:
        return _parse(User, self._send("PUT", "user", f"/users/{user_id}", user))

    def delete_user(self, user_id: str) -> None:
        self._request("DELETE", "user", f"/users/{user_id}")

    # ------------------------------------------------------------------
    # Workflow: projects, lists, tasks, attachments
    # ------------------------------------------------------------------

    def get_projects(self, limit: int | None = None, offset: int | None = None) -> list[Project]:
        data = self._get("workflow", "/projects", {"limit": limit, "offset": offset})
        return _parse_list(Project, data)

    def create_project(self, project: Project) -> Project:
        return _parse(Project, self._send("POST", "workflow", "/projects", project))

    def get_project(self, project_id: str) -> Project:
        """Fetch a project. ``"me"`` refers to the caller's personal project."""
        return _parse(Project, self._get("workflow", f"/projects/{project_id}"))

    def update_project(self, project_id: str, project: Project) -> Project:
        return _parse(Project, self._send("PUT", "workflow", f"/projects/{project_id}", project))

    def delete_project(self, project_id: str) -> None:
        self._request("DELETE", "workflow", f"/projects/{project_id}")

    def get_project_members(self, project_id: str) -> list[int]:
        return _parse_ids(self._get("workflow", f"/projects/{project_id}/members"))

    def update_project_members(self, project_id: str, members: list[int]) -> None:
        self._send_no_content("PUT", "workflow", f"/projects/{project_id}/members", list(members))

    def get_project_lists(self, project_id: str) -> list[ProjectList]:
        return _parse_list(ProjectList, self._get("workflow", f"/projects/{project_id}/lists"))

    def create_project_list(self, project_id: str, project_list: ProjectList) -> ProjectList:
        path = f"/projects/{project_id}/lists"
        return _parse(ProjectList, self._send("POST", "workflow", path, project_list))

    def get_project_list(self, project_id: str, list_id: str) -> ProjectList:
        path = f"/projects/{project_id}/lists/{list_id}"
        return _parse(ProjectList, self._get("workflow", path))

    def update_project_list(
        self, project_id: str, list_id: str, project_list: ProjectList
    ) -> ProjectList:
        path = f"/projects/{project_id}/lists/{list_id}"
        return _parse(ProjectList, self._send("PUT", "workflow", path, project_list))

    def delete_project_list(self, project_id: str, list_id: str) -> None:
        self._request("DELETE", "workflow", f"/projects/{project_id}/lists/{list_id}")

    def get_project_tasks(
        self, project_id: str, limit: int | None = None, offset: int | None = None
    ) -> list[Task]:
        path = f"/projects/{project_id}/tasks"
        return _parse_list(Task, self._get("workflow", path, {"limit": limit, "offset": offset}))

    def get_list_tasks(
        self,
        project_id: str,
        list_id: str,
        limit: int | None = None,
        offset: int | None = None,
    ) -> list[Task]:
        path = f"/projects/{project_id}/lists/{list_id}/tasks"
        return _parse_list(Task, self._get("workflow", path, {"limit": limit, "offset": offset}))

    def create_task(self, project_id: str, list_id: str, task: Task) -> Task:
        path = f"/projects/{project_id}/lists/{list_id}/tasks"
        return _parse(Task, self._send("POST", "workflow", path, task))

    def get_task(self, project_id: str, list_id: str, task_id: str) -> Task:
        path = f"/projects/{project_id}/lists/{list_id}/tasks/{task_id}"
        return _parse(Task, self._get("workflow", path))

    def update_task(self, project_id: str, list_id: str, task_id: str, task: Task) -> Task:
        path = f"/projects/{project_id}/lists/{list_id}/tasks/{task_id}"
        return _parse(Task, self._send("PUT", "workflow", path, task))

    def delete_task(self, project_id: str, list_id: str, task_id: str) -> None:
        self._request("DELETE", "workflow", f"/projects/{project_id}/lists/{list_id}/tasks/{task_id}")

    def get_task_attachments(self, project_id: str, list_id: str, task_id: str) -> list[Attachment]:
        path = f"/projects/{project_id}/lists/{list_id}/tasks/{task_id}/attachments"
        return _parse_list(Attachment, self._get("workflow", path))

    def download_task_attachment(
        self, project_id: str, list_id: str, task_id: str, attachment_id: str
    ) -> bytes:
        path = f"/projects/{project_id}/lists/{list_id}/tasks/{task_id}/attachments/{attachment_id}"
        return self._request("GET", "workflow", path).content

    def upload_task_attachment(
        self, project_id: str, list_id: str, task_id: str, file_path: str | Path
    ) -> Attachment:
        """Attach a local file to a task as a multipart upload."""
        file_path = Path(file_path)
        path = f"/projects/{project_id}/lists/{list_id}/tasks/{task_id}/attachments"
        with file_path.open("rb") as fh:
            response = self._request(
                "POST", "workflow", path, files={"file": (file_path.name, fh)}
            )
        return _parse(Attachment, _decode_json(response))

    def delete_task_attachment(
        self, project_id: str, list_id: str, task_id: str, attachment_id: str
    ) -> None:
        path = f"/projects/{project_id}/lists/{list_id}/tasks/{task_id}/attachments/{attachment_id}"
        self._request("DELETE", "workflow", path)
