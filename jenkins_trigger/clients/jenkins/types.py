from pydantic import BaseModel


class Executable(BaseModel):
    url: str


class JenkinsQueueItem(BaseModel):
    """`{location}api/json` of a queued item, decodable only once an executor picked it up"""

    executable: Executable


class JenkinsBuildResult(BaseModel):
    # null while running, then SUCCESS/ABORTED/FAILURE/...
    result: str | None = None


def api_json_url(resource_url: str) -> str:
    if not resource_url.endswith("/"):
        resource_url += "/"
    return f"{resource_url}api/json"
