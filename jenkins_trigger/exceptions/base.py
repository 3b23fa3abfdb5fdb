class JenkinsTriggerError(Exception):
    pass
