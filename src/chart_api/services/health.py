from directory_connector import DirectoryConnector


def health_check(db: DirectoryConnector) -> str:
    db.ping()
    return "ok"
