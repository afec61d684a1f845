"""Classification of a selected credential into a finding."""

from datetime import datetime

from ..entities import UNKNOWN_APPLICATION_NAME, Application, Credential, Finding
from ..entities.credential import as_utc
from ..value_objects import AppType, CredentialType, FindingLevel


def days_to_expiry(expires_at: datetime, now: datetime) -> int:
    """
    Signed whole days from ``now`` until ``expires_at``.

    ``timedelta.days`` floors, so anything past expiry is negative even by
    one second. Naive datetimes are treated as UTC.
    """
    return (as_utc(expires_at) - as_utc(now)).days


def classify(
    app: Application,
    kind: CredentialType,
    credential: Credential | None,
    now: datetime,
    warning_days: int,
) -> Finding | None:
    """
    Build a finding for an application's latest credential of one kind.

    Args:
        app: Application owning the credential.
        kind: Kind of credential being classified.
        credential: The selected latest credential, if any.
        now: Reference point in time.
        warning_days: Size of the warning window in days.

    Returns:
        A Critical finding if already expired, a Warning finding if it expires
        within the window, otherwise None.
    """
    if credential is None or credential.expires_at is None:
        return None

    days = days_to_expiry(credential.expires_at, now)
    if days < 0:
        level = FindingLevel.CRITICAL
        problem = f"Latest {kind.display_name} Already Expired {-days} days ago"
    elif days < warning_days:
        level = FindingLevel.WARNING
        problem = f"Latest {kind.display_name} Expires in {days} days"
    else:
        return None

    return Finding(
        level=level,
        credential_type=kind,
        name=app.display_name or UNKNOWN_APPLICATION_NAME,
        problem_text=problem,
        expiry_date=credential.expires_at,
        app_type=AppType.APP_REGISTRATION,
        application_id=app.app_id,
    )
