"""Files — request path resolution and the GET/PUT/DELETE operations.

``resolver`` turns an untrusted URL into a path confined to the served
root; ``dispatcher`` performs the filesystem operation for a verb.
"""
