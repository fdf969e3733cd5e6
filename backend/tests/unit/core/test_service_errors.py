"""
Unit tests for the service exception taxonomy.
"""
import pytest

from apps.core.services.base import (
    BaseService, ExternalServiceError, InvalidArgument, MissingArgument,
    RemoteRejected, ServiceException, ValidationError
)


@pytest.mark.parametrize('exc_class,code,parent', [
    (InvalidArgument, 'INVALID_ARGUMENT', ValidationError),
    (MissingArgument, 'MISSING_ARGUMENT', ValidationError),
    (RemoteRejected, 'REMOTE_REJECTED', ExternalServiceError),
])
def test_error_kinds(exc_class, code, parent):
    exc = exc_class('Something went wrong')

    assert isinstance(exc, parent)
    assert isinstance(exc, ServiceException)
    assert exc.code == code
    assert exc.status_code == 400
    assert exc.message == str(exc) == 'Something went wrong'
    assert exc.details == {}


def test_explicit_code_and_details():
    exc = RemoteRejected('No', code='CUSTOM', details={'type': 'CardError'})

    assert exc.code == 'CUSTOM'
    assert exc.details == {'type': 'CardError'}


def test_base_service_logs_context(caplog):
    class DemoService(BaseService):
        pass

    with caplog.at_level('INFO'):
        DemoService().log_info('hello', intent_id='pi_1')

    record = caplog.records[-1]
    assert record.getMessage() == 'hello'
    assert record.context == {'intent_id': 'pi_1'}
