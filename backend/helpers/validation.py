"""
Request body schemas for the Pages endpoints.
"""

import re
from typing import Annotated, Literal

from pydantic import AfterValidator, BaseModel, ValidationError

OWNER_RE = re.compile(r"^[A-Za-z0-9](?:[A-Za-z0-9]|-(?=[A-Za-z0-9])){0,38}$")
REPO_RE = re.compile(r"^[A-Za-z0-9._-]{1,100}$")
BRANCH_RE = re.compile(r"^[A-Za-z0-9._/-]{1,255}$")


def _check_token(value):
    if not value:
        raise ValueError("GitHub token required")
    return value


def _check_owner(value):
    if not OWNER_RE.fullmatch(value):
        raise ValueError("Invalid GitHub username")
    return value


def _check_repo(value):
    if not REPO_RE.fullmatch(value):
        raise ValueError("Repository name can only contain alphanumeric characters, dots, underscores, and hyphens")
    return value


def _check_branch(value):
    if not BRANCH_RE.fullmatch(value):
        raise ValueError("Branch name can only contain letters, numbers, dots, underscores, slashes, and hyphens")
    return value


GitHubToken = Annotated[str, AfterValidator(_check_token)]
OwnerName = Annotated[str, AfterValidator(_check_owner)]
RepoName = Annotated[str, AfterValidator(_check_repo)]
BranchName = Annotated[str, AfterValidator(_check_branch)]


class ListPagesSitesRequest(BaseModel):
    provider_token: GitHubToken


class GetPagesInfoRequest(BaseModel):
    owner: OwnerName
    repo: RepoName
    provider_token: GitHubToken


class EnablePagesRequest(BaseModel):
    owner: OwnerName
    repo: RepoName
    branch: BranchName
    path: Literal["/", "/docs"]
    provider_token: GitHubToken


def _format_error(err):
    field = ".".join(str(part) for part in err["loc"]) or "body"
    if err["type"] == "value_error":
        message = str(err["ctx"]["error"])
    elif err["type"] == "literal_error" and err["loc"] == ("path",):
        message = 'Path must be either "/" (root) or "/docs"'
    else:
        message = err["msg"]
    return f"{field}: {message}"


def validate_body(model, body):
    """Validate a parsed JSON body against `model`.

    Returns (instance, None) on success or (None, details) where details is
    a list of "field: message" strings.
    """
    if not isinstance(body, dict):
        return None, ["body: Expected a JSON object"]
    try:
        return model.model_validate(body), None
    except ValidationError as e:
        return None, [_format_error(err) for err in e.errors()]
