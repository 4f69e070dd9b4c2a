"""Endpoint catalog served by ``GET /api``."""

ENDPOINTS: dict[str, dict] = {
    "GET /api": {
        "description": "serves up a json representation of all the available endpoints of the api",
    },
    "GET /api/topics": {
        "description": "serves an array of all topics",
        "queries": [],
        "exampleResponse": {
            "topics": [{"slug": "football", "description": "Footie!"}],
        },
    },
    "GET /api/articles": {
        "description": "serves a page of articles with their comment counts",
        "queries": ["topic", "sort_by", "order", "limit", "p"],
        "sortable": [
            "article_id", "title", "topic", "body", "created_at", "votes", "comment_count",
        ],
        "exampleResponse": {
            "articles": [
                {
                    "article_id": 34,
                    "title": "Seafood substitutions are increasing",
                    "topic": "cooking",
                    "body": "Text from the article..",
                    "created_at": "2018-05-30T15:59:13.341000+00:00",
                    "votes": 0,
                    "article_img_url": "https://images.pexels.com/photos/158651/news.jpeg",
                    "comment_count": 6,
                }
            ]
        },
    },
    "GET /api/articles/:article_id": {
        "description": "serves the article with the given id and its comment count",
        "queries": [],
        "exampleResponse": {
            "article": {
                "article_id": 1,
                "title": "Living in the shadow of a great man",
                "topic": "mitch",
                "body": "I find this existence challenging",
                "created_at": "2020-07-09T20:11:00+00:00",
                "votes": 100,
                "article_img_url": "https://images.pexels.com/photos/158651/news.jpeg",
                "comment_count": 11,
            }
        },
    },
    "PATCH /api/articles/:article_id": {
        "description": "adds inc_votes (may be negative) to the article's votes and serves the updated article",
        "requestBody": {"inc_votes": 1},
        "exampleResponse": {
            "article": {
                "article_id": 1,
                "title": "Living in the shadow of a great man",
                "topic": "mitch",
                "body": "I find this existence challenging",
                "created_at": "2020-07-09T20:11:00+00:00",
                "votes": 101,
                "article_img_url": "https://images.pexels.com/photos/158651/news.jpeg",
            }
        },
    },
    "GET /api/articles/:article_id/comments": {
        "description": "serves a page of the article's comments, newest first",
        "queries": ["limit", "p"],
        "exampleResponse": {
            "comments": [
                {
                    "comment_id": 5,
                    "body": "I hate streaming noses",
                    "author": "icellusedkars",
                    "article_id": 1,
                    "votes": 0,
                    "created_at": "2020-11-03T21:00:00+00:00",
                }
            ]
        },
    },
    "POST /api/articles/:article_id/comments": {
        "description": "adds a comment to the article and serves the new comment",
        "requestBody": {"username": "icellusedkars", "body": "this is great!"},
        "exampleResponse": {
            "comment": {
                "comment_id": 19,
                "body": "this is great!",
                "author": "icellusedkars",
                "article_id": 1,
                "votes": 0,
                "created_at": "2020-11-03T21:00:00+00:00",
            }
        },
    },
    "GET /api/users": {
        "description": "serves an array of all users",
        "queries": [],
        "exampleResponse": {
            "users": [
                {
                    "username": "butter_bridge",
                    "name": "jonny",
                    "avatar_url": "https://www.healthytherapies.com/wp-content/uploads/2016/06/Lime3.jpg",
                }
            ]
        },
    },
    "GET /api/users/:username": {
        "description": "serves the user with the given username",
        "queries": [],
        "exampleResponse": {
            "user": {
                "username": "butter_bridge",
                "name": "jonny",
                "avatar_url": "https://www.healthytherapies.com/wp-content/uploads/2016/06/Lime3.jpg",
            }
        },
    },
    "PATCH /api/comments/:comment_id": {
        "description": "adds inc_votes (may be negative) to the comment's votes and serves the updated comment",
        "requestBody": {"inc_votes": 1},
        "exampleResponse": {
            "comment": {
                "comment_id": 1,
                "body": "Oh, I've got compassion running out of my nose, pal!",
                "author": "butter_bridge",
                "article_id": 9,
                "votes": 17,
                "created_at": "2020-04-06T12:17:00+00:00",
            }
        },
    },
    "DELETE /api/comments/:comment_id": {
        "description": "deletes the comment; responds 204 with no body",
    },
}
