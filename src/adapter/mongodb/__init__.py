USERS_COLLECTION_NAME = 'users'
EVENTS_COLLECTION_NAME = 'events'
PRAYER_REQUESTS_COLLECTION_NAME = 'prayer_requests'
CONTACT_MESSAGES_COLLECTION_NAME = 'contact_messages'
NEWSLETTER_COLLECTION_NAME = 'newsletter_subscriptions'
SERMONS_COLLECTION_NAME = 'sermons'
