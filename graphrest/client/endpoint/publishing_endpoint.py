"""
Graph Client Publishing Endpoint

Wall posts, comments and likes, written as thin calls through the object and
connection operations. Read them with fetch_connections(id, "feed" /
"comments" / "likes") and remove posts or comments with delete_object().
"""

from typing import Dict, Any, Optional

from .base_endpoint import BaseEndpoint


class PublishingEndpoint(BaseEndpoint):
    """Client endpoint for publishing actions."""

    def post_wall_message(self, message: str, attachment: Optional[Dict[str, Any]] = None,
                          profile_id: str = "me") -> Any:
        """
        Post a message to a profile's feed.

        Args:
            message: Message text
            attachment: Optional link attachment, e.g.
                {"name": "Link name", "link": "http://www.example.com/",
                 "caption": "...", "description": "...", "picture": "..."}
            profile_id: Profile to post to

        Returns:
            Raw server response
        """
        merged = dict(attachment or {})
        merged['message'] = message
        return self.client.write_object(profile_id, "feed", merged)

    def post_comment(self, object_id: str, message: str) -> Any:
        """Write a comment on the given object."""
        return self.client.write_object(object_id, "comments", {'message': message})

    def like(self, object_id: str) -> Any:
        """Like the given object."""
        return self.client.write_object(object_id, "likes")

    def unlike(self, object_id: str) -> Any:
        """
        Remove the current user's like from the given object.

        Raises:
            MissingAccessTokenError: If no access token is configured
        """
        self._require_access_token("Unliking requires an access token")
        return self.client.delete_connections(object_id, "likes")
