from jenkins_trigger.exceptions.base import JenkinsTriggerError


class ClientError(JenkinsTriggerError):
    pass


class NetworkError(ClientError):
    pass


class ProtocolError(ClientError):
    pass


class PollTimeoutError(ClientError):
    pass
