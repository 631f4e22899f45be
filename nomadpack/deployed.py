"""Discovery of deployed packs and their jobs, and status tables for them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Mapping, Optional, Sequence

from .args import ArgumentError
from .formatters import format_sha1_reference

PACK_NAME_KEY = "pack.name"
PACK_REGISTRY_KEY = "pack.registry"
PACK_DEPLOYMENT_NAME_KEY = "pack.deployment_name"

RED = "red"


class JobLookupError(LookupError):
    """Raised when jobs cannot be listed, read or matched to a deployment."""


@dataclass
class Job:
    """A job as reported by the cluster."""

    id: str
    status: str = ""
    meta: Optional[dict[str, str]] = None


class JobsClient:
    """An in-memory view of the cluster's jobs.

    ``failing`` maps job IDs that are listed but whose details cannot be read
    to the reason reported for them.
    """

    def __init__(
        self, jobs: Iterable[Job] = (), failing: Optional[Mapping[str, str]] = None
    ) -> None:
        self._jobs = {job.id: job for job in jobs}
        self._failing = dict(failing or {})

    def list(self) -> list[str]:
        """IDs of all jobs known to the cluster."""
        return [*self._jobs, *(i for i in self._failing if i not in self._jobs)]

    def info(self, job_id: str) -> Job:
        """Full details of one job."""
        if job_id in self._failing:
            raise JobLookupError(self._failing[job_id])
        try:
            return self._jobs[job_id]
        except KeyError:
            raise JobLookupError(f"job {job_id!r} not found") from None


@dataclass(frozen=True)
class JobStatusInfo:
    """Status information about a running job of a pack."""

    pack_name: str
    registry_name: str
    deployment_name: str
    job_id: str
    status: str


@dataclass(frozen=True)
class JobStatusError:
    """A job whose status could not be retrieved, and why."""

    job_id: str
    error: Exception


@dataclass
class Table:
    """Tabular output: headers, rows of cell text and per-column colours."""

    headers: tuple[str, ...]
    rows: list[tuple[str, ...]] = field(default_factory=list)
    colors: dict[int, str] = field(default_factory=dict)


def _list_jobs(client: JobsClient, context: str) -> list[str]:
    try:
        return client.list()
    except Exception as err:
        raise JobLookupError(f"error finding jobs{context}: {err}") from err


def get_deployed_packs(client: JobsClient) -> dict[str, set[str]]:
    """Map each deployed pack name to the set of registries it came from."""
    pack_registries: dict[str, set[str]] = {}
    for job_id in _list_jobs(client, ""):
        try:
            job = client.info(job_id)
        except Exception as err:
            raise JobLookupError(f"error retrieving job {job_id}: {err}") from err
        if not job.meta:
            continue
        pack = job.meta.get(PACK_NAME_KEY)
        registry = job.meta.get(PACK_REGISTRY_KEY)
        if pack is not None and registry is not None:
            pack_registries.setdefault(pack, set()).add(registry)
    return pack_registries


def get_pack_jobs_by_deploy(
    client: JobsClient, pack_name: str, registry: str, deployment_name: str
) -> list[Job]:
    """Jobs of a pack that belong to the given deployment."""
    job_ids = _list_jobs(client, f" for pack {pack_name}")
    if not job_ids:
        raise JobLookupError("no job(s) found")

    pack_jobs: list[Job] = []
    has_other_deploys = False
    for job_id in job_ids:
        try:
            job = client.info(job_id)
        except Exception as err:
            raise JobLookupError(
                f"error retrieving job {job_id} for pack {pack_name}: {err}"
            ) from err

        meta = job.meta
        if meta is not None and PACK_DEPLOYMENT_NAME_KEY in meta:
            if meta[PACK_DEPLOYMENT_NAME_KEY] == deployment_name:
                pack_jobs.append(job)
            elif (
                meta.get(PACK_REGISTRY_KEY) == registry
                and meta.get(PACK_NAME_KEY) == pack_name
                and PACK_REGISTRY_KEY in meta
                and PACK_NAME_KEY in meta
            ):
                has_other_deploys = True

        if not pack_jobs and has_other_deploys:
            raise JobLookupError(
                f'pack "{pack_name}" running but not in deployment "{deployment_name}". '
                f'Run "nomad-pack status {pack_name}" for more information'
            )
    return pack_jobs


def get_deployed_pack_jobs(
    client: JobsClient, pack_name: str, deployment_name: str = ""
) -> tuple[list[JobStatusInfo], list[JobStatusError]]:
    """Status of a pack's jobs, optionally limited to one deployment.

    Jobs whose details cannot be read are returned as errors instead.
    """
    job_ids = _list_jobs(client, f" for pack {pack_name}")
    infos: list[JobStatusInfo] = []
    failures: list[JobStatusError] = []
    for job_id in job_ids:
        try:
            job = client.info(job_id)
        except Exception as err:
            failures.append(JobStatusError(job_id, err))
            continue

        meta = job.meta
        if meta is None or meta.get(PACK_NAME_KEY) != pack_name:
            continue
        if deployment_name:
            deployed_as = meta.get(PACK_DEPLOYMENT_NAME_KEY)
            if deployed_as is not None and deployed_as != deployment_name:
                continue
        infos.append(
            JobStatusInfo(
                pack_name=pack_name,
                registry_name=meta.get(PACK_REGISTRY_KEY, ""),
                deployment_name=meta.get(PACK_DEPLOYMENT_NAME_KEY, ""),
                job_id=job.id,
                status=job.status,
            )
        )
    return infos, failures


def validate_status_args(deployment_name: str, args: Sequence[str]) -> None:
    """Check the positional args of the status command against its flags."""
    if len(args) > 1:
        raise ArgumentError(f"this command accepts at most 1 arg, received {len(args)}")
    if deployment_name and not args:
        raise ArgumentError("--name can only be used if pack name is provided")


def registry_name(name: str, ref: str, local_ref: str) -> str:
    """Display name of a cached registry with its (shortened) refs."""
    if ref == local_ref:
        return f"{name}@{format_sha1_reference(local_ref)}"
    return f"{name}@{format_sha1_reference(ref)} ({format_sha1_reference(local_ref)})"


def has_var_overrides(var_files: Sequence[str], variables: Mapping[str, str]) -> bool:
    """Whether any variable files or command-line variables were given."""
    return len(var_files) > 0 or len(variables) > 0


def format_deployed_packs(pack_registry_map: Mapping[str, Iterable[str]]) -> Table:
    """Table of deployed packs and their registries."""
    table = Table(("Pack Name", "Registry Name"))
    for pack in sorted(pack_registry_map):
        for registry in sorted(pack_registry_map[pack]):
            table.rows.append((pack, registry))
    return table


def format_deployed_pack_jobs(pack_jobs: Iterable[JobStatusInfo]) -> Table:
    """Table of a pack's jobs with their deployment and status."""
    table = Table(("Pack Name", "Registry Name", "Deployment Name", "Job Name", "Status"))
    table.rows.extend(
        (info.pack_name, info.registry_name, info.deployment_name, info.job_id, info.status)
        for info in pack_jobs
    )
    return table


def format_deployed_pack_errors(errors: Iterable[JobStatusError]) -> Table:
    """Table of jobs whose status could not be read; the error column is red."""
    table = Table(("Job Name", "Error"), colors={1: RED})
    table.rows.extend((failure.job_id, str(failure.error)) for failure in errors)
    return table