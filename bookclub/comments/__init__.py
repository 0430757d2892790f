"""
Comment package: validation rules, moderation policy, query engine and
the service tying them to storage.

The HTTP routes live in ``bookclub.comments.router`` and are mounted by
``bookclub.main``; they are not imported here so that the storage layer
can use ``comments.query`` without pulling in the web stack.
"""
