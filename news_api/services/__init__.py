# Services package.
#
# Each module exposes a focused set of async functions that encapsulate
# database access for a single resource:
#
#   article_service  — article detail, filtered/sorted listing, votes
#   comment_service  — comments of an article, create, votes, delete
#   topic_service    — topic listing
#   user_service     — user listing and lookup by username
#
# All service functions accept an AsyncSession as their first argument
# so that the router layer controls the transaction boundary via the
# ``get_db`` dependency.  Failures are raised as ``news_api.errors``
# exceptions and resolved into responses by the error pipeline.
