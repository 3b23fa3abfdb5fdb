from jenkins_trigger.exceptions.base import JenkinsTriggerError


class ConfigError(JenkinsTriggerError):
    pass
