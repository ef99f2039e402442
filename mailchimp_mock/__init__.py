"""Mock server for the Mailchimp list-member API."""
