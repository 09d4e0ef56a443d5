import pytest
from django.utils import timezone

from crm.exceptions import ConstraintViolation, Forbidden
from crm.models import TimeLog

TIME_LOGS_QUERY = """
query ($issueId: ID!) {
  crmTimeLogsByIssue(issueId: $issueId) { timeSpent userId }
  crmIssueTotalTime(issueId: $issueId)
}
"""

CREATE_TIME_LOG = """
mutation ($input: CreateTimeLogInput!) {
  createCrmTimeLog(input: $input) { id timeSpent userId description }
}
"""

UPDATE_TIME_LOG = """
mutation ($id: ID!, $input: UpdateTimeLogInput!) {
  updateCrmTimeLog(id: $id, input: $input) { id timeSpent }
}
"""

DELETE_TIME_LOG = """
mutation ($id: ID!) {
  deleteCrmTimeLog(id: $id) { id }
}
"""


@pytest.mark.django_db
def test_total_time_is_zero_without_logs(gql, member, issue):
    result = gql(TIME_LOGS_QUERY, member, issueId=str(issue.id))

    assert result.errors is None
    assert result.data == {"crmTimeLogsByIssue": [], "crmIssueTotalTime": 0}


@pytest.mark.django_db
def test_logged_time_is_credited_to_caller(gql, teammate, member, issue, time_log):
    result = gql(CREATE_TIME_LOG, teammate, input={
        "issueId": str(issue.id), "timeSpent": 45, "description": "Pairing",
        "loggedAt": timezone.now().isoformat(),
    })
    assert result.errors is None
    assert result.data["createCrmTimeLog"]["userId"] == str(teammate.pk)

    totals = gql(TIME_LOGS_QUERY, member, issueId=str(issue.id))
    assert totals.data["crmIssueTotalTime"] == 75


@pytest.mark.django_db
def test_zero_minutes_is_rejected(gql, member, issue):
    result = gql(CREATE_TIME_LOG, member, input={
        "issueId": str(issue.id), "timeSpent": 0, "loggedAt": timezone.now().isoformat(),
    })

    assert isinstance(result.errors[0].original_error, ConstraintViolation)


@pytest.mark.django_db
def test_outsider_cannot_log_time(gql, outsider, issue):
    result = gql(CREATE_TIME_LOG, outsider, input={
        "issueId": str(issue.id), "timeSpent": 10, "loggedAt": timezone.now().isoformat(),
    })

    assert isinstance(result.errors[0].original_error, Forbidden)


@pytest.mark.django_db
def test_only_owner_updates_time_log(gql, member, teammate, time_log):
    denied = gql(UPDATE_TIME_LOG, teammate, id=str(time_log.id), input={"timeSpent": 5})
    assert str(denied.errors[0].original_error) == "Can only edit your own time logs"

    result = gql(UPDATE_TIME_LOG, member, id=str(time_log.id), input={"timeSpent": 50})
    assert result.errors is None
    assert result.data["updateCrmTimeLog"]["timeSpent"] == 50


@pytest.mark.django_db
def test_only_owner_deletes_time_log(gql, member, teammate, time_log):
    denied = gql(DELETE_TIME_LOG, teammate, id=str(time_log.id))
    assert isinstance(denied.errors[0].original_error, Forbidden)

    result = gql(DELETE_TIME_LOG, member, id=str(time_log.id))
    assert result.data["deleteCrmTimeLog"]["id"] == str(time_log.id)
    assert not TimeLog.objects.filter(id=time_log.id).exists()
