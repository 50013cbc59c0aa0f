"""GraphQL documents sent to the Graphlit data API."""

# Project

UPDATE_PROJECT = """
mutation UpdateProject($project: ProjectUpdateInput!) {
  updateProject(project: $project) { id }
}
"""

UPSERT_SPECIFICATION = """
mutation UpsertSpecification($specification: SpecificationInput!) {
  upsertSpecification(specification: $specification) { id name state type serviceType }
}
"""

UPSERT_WORKFLOW = """
mutation UpsertWorkflow($workflow: WorkflowInput!) {
  upsertWorkflow(workflow: $workflow) { id name state }
}
"""

QUERY_PROJECT_USAGE = """
query LookupUsage($startDate: DateTime!, $duration: TimeSpan!, $names: [String!], $excludedNames: [String!], $offset: Int, $limit: Int) {
  usage(startDate: $startDate, duration: $duration, names: $names, excludedNames: $excludedNames, offset: $offset, limit: $limit) {
    id correlationId date credits name metric workflow entityType entityId projectId ownerId uri
    duration cost count operation operationType prompt promptTokens completion completionTokens
    tokens modelService modelName processorName contentType fileType
  }
}
"""

# Conversation and retrieval

ASK_GRAPHLIT = """
mutation AskGraphlit($prompt: String!, $type: SdkTypes, $id: ID, $specification: EntityReferenceInput, $correlationId: String) {
  askGraphlit(prompt: $prompt, type: $type, id: $id, specification: $specification, correlationId: $correlationId) {
    conversation { id }
    message { role message }
  }
}
"""

PROMPT_CONVERSATION = """
mutation PromptConversation($prompt: String!, $id: ID) {
  promptConversation(prompt: $prompt, id: $id) {
    conversation { id }
    message {
      role author message tokens completionTime timestamp
      citations {
        content { id name uri state mimeType fileType }
        index text startTime endTime pageNumber
      }
    }
  }
}
"""

RETRIEVE_SOURCES = """
mutation RetrieveSources($prompt: String!, $filter: ContentFilter, $augmentedFilter: ContentFilter, $retrievalStrategy: RetrievalStrategyInput, $rerankingStrategy: RerankingStrategyInput) {
  retrieveSources(prompt: $prompt, filter: $filter, augmentedFilter: $augmentedFilter, retrievalStrategy: $retrievalStrategy, rerankingStrategy: $rerankingStrategy) {
    results {
      type relevance text startTime endTime pageNumber frameNumber
      content { id }
    }
  }
}
"""

EXTRACT_TEXT = """
mutation ExtractText($prompt: String!, $text: String!, $textType: TextTypes, $specification: EntityReferenceInput, $tools: [ToolDefinitionInput!]!) {
  extractText(prompt: $prompt, text: $text, textType: $textType, specification: $specification, tools: $tools) {
    specification { id }
    content { id }
    value startTime endTime pageNumber error
  }
}
"""

DESCRIBE_IMAGE = """
mutation DescribeImage($prompt: String!, $uri: URL!) {
  describeImage(prompt: $prompt, uri: $uri) { role author message tokens completionTime timestamp }
}
"""

# Contents

GET_CONTENT = """
query GetContent($id: ID!) {
  content(id: $id) { id name state uri imageUri mimeType fileType type fileName }
}
"""

QUERY_CONTENTS = """
query QueryContents($filter: ContentFilter) {
  contents(filter: $filter) {
    results { id name relevance state uri imageUri mimeType fileType fileName type creationDate }
  }
}
"""

IS_CONTENT_DONE = """
query IsContentDone($id: ID!) {
  isContentDone(id: $id) { result }
}
"""

DELETE_CONTENT = """
mutation DeleteContent($id: ID!) {
  deleteContent(id: $id) { id state }
}
"""

DELETE_ALL_CONTENTS = """
mutation DeleteAllContents($filter: ContentFilter, $isSynchronous: Boolean) {
  deleteAllContents(filter: $filter, isSynchronous: $isSynchronous) { id state }
}
"""

INGEST_URI = """
mutation IngestUri($uri: URL!, $isSynchronous: Boolean) {
  ingestUri(uri: $uri, isSynchronous: $isSynchronous) { id name state type fileType mimeType uri }
}
"""

INGEST_TEXT = """
mutation IngestText($text: String!, $name: String, $textType: TextTypes, $id: ID, $isSynchronous: Boolean) {
  ingestText(text: $text, name: $name, textType: $textType, id: $id, isSynchronous: $isSynchronous) { id name state type }
}
"""

INGEST_MEMORY = """
mutation IngestMemory($text: String!, $name: String, $textType: TextTypes) {
  ingestMemory(text: $text, name: $name, textType: $textType) { id name state type }
}
"""

INGEST_ENCODED_FILE = """
mutation IngestEncodedFile($name: String!, $data: String!, $mimeType: String!, $isSynchronous: Boolean) {
  ingestEncodedFile(name: $name, data: $data, mimeType: $mimeType, isSynchronous: $isSynchronous) { id name state type fileType mimeType }
}
"""

SCREENSHOT_PAGE = """
mutation ScreenshotPage($uri: URL!, $maximumHeight: Int, $isSynchronous: Boolean) {
  screenshotPage(uri: $uri, maximumHeight: $maximumHeight, isSynchronous: $isSynchronous) { id name state type fileType mimeType uri }
}
"""

PUBLISH_TEXT = """
mutation PublishText($text: String!, $textType: TextTypes, $connector: ContentPublishingConnectorInput!, $name: String, $isSynchronous: Boolean) {
  publishText(text: $text, textType: $textType, connector: $connector, name: $name, isSynchronous: $isSynchronous) {
    contents { id name state type mimeType uri }
  }
}
"""

# Collections

CREATE_COLLECTION = """
mutation CreateCollection($collection: CollectionInput!) {
  createCollection(collection: $collection) { id name state type }
}
"""

ADD_CONTENTS_TO_COLLECTIONS = """
mutation AddContentsToCollections($contents: [EntityReferenceInput!]!, $collections: [EntityReferenceInput!]!) {
  addContentsToCollections(contents: $contents, collections: $collections) { id name state }
}
"""

REMOVE_CONTENTS_FROM_COLLECTION = """
mutation RemoveContentsFromCollection($contents: [EntityReferenceInput!]!, $collection: EntityReferenceInput!) {
  removeContentsFromCollection(contents: $contents, collection: $collection) { id name state }
}
"""

QUERY_COLLECTIONS = """
query QueryCollections($filter: CollectionFilter) {
  collections(filter: $filter) { results { id name relevance state type } }
}
"""

DELETE_COLLECTION = """
mutation DeleteCollection($id: ID!) {
  deleteCollection(id: $id) { id state }
}
"""

DELETE_ALL_COLLECTIONS = """
mutation DeleteAllCollections($filter: CollectionFilter, $isSynchronous: Boolean) {
  deleteAllCollections(filter: $filter, isSynchronous: $isSynchronous) { id state }
}
"""

# Conversations

QUERY_CONVERSATIONS = """
query QueryConversations($filter: ConversationFilter) {
  conversations(filter: $filter) { results { id name relevance state type } }
}
"""

DELETE_CONVERSATION = """
mutation DeleteConversation($id: ID!) {
  deleteConversation(id: $id) { id state }
}
"""

DELETE_ALL_CONVERSATIONS = """
mutation DeleteAllConversations($filter: ConversationFilter, $isSynchronous: Boolean) {
  deleteAllConversations(filter: $filter, isSynchronous: $isSynchronous) { id state }
}
"""

# Feeds

CREATE_FEED = """
mutation CreateFeed($feed: FeedInput!) {
  createFeed(feed: $feed) { id name state type }
}
"""

QUERY_FEEDS = """
query QueryFeeds($filter: FeedFilter) {
  feeds(filter: $filter) { results { id name relevance state type } }
}
"""

IS_FEED_DONE = """
query IsFeedDone($id: ID!) {
  isFeedDone(id: $id) { result }
}
"""

DELETE_FEED = """
mutation DeleteFeed($id: ID!) {
  deleteFeed(id: $id) { id state }
}
"""

DELETE_ALL_FEEDS = """
mutation DeleteAllFeeds($filter: FeedFilter, $isSynchronous: Boolean) {
  deleteAllFeeds(filter: $filter, isSynchronous: $isSynchronous) { id state }
}
"""

# Source listing

QUERY_NOTION_DATABASES = """
query QueryNotionDatabases($properties: NotionDatabasesInput!) {
  notionDatabases(properties: $properties) { results { name identifier } }
}
"""

QUERY_NOTION_PAGES = """
query QueryNotionPages($properties: NotionPagesInput!, $identifier: String!) {
  notionPages(properties: $properties, identifier: $identifier) { results { name identifier } }
}
"""

QUERY_DROPBOX_FOLDERS = """
query QueryDropboxFolders($properties: DropboxFoldersInput!, $folderPath: String) {
  dropboxFolders(properties: $properties, folderPath: $folderPath) { results { folderName folderId } }
}
"""

QUERY_BOX_FOLDERS = """
query QueryBoxFolders($properties: BoxFoldersInput!, $folderId: ID) {
  boxFolders(properties: $properties, folderId: $folderId) { results { folderName folderId } }
}
"""

QUERY_DISCORD_GUILDS = """
query QueryDiscordGuilds($properties: DiscordGuildsInput!) {
  discordGuilds(properties: $properties) { results { guildName guildId } }
}
"""

QUERY_DISCORD_CHANNELS = """
query QueryDiscordChannels($properties: DiscordChannelsInput!) {
  discordChannels(properties: $properties) { results { channelName channelId } }
}
"""

QUERY_GOOGLE_CALENDARS = """
query QueryGoogleCalendars($properties: GoogleCalendarsInput!) {
  googleCalendars(properties: $properties) { results { calendarName calendarId } }
}
"""

QUERY_MICROSOFT_CALENDARS = """
query QueryMicrosoftCalendars($properties: MicrosoftCalendarsInput!) {
  microsoftCalendars(properties: $properties) { results { calendarName calendarId } }
}
"""

QUERY_LINEAR_PROJECTS = """
query QueryLinearProjects($properties: LinearProjectsInput!) {
  linearProjects(properties: $properties) { results }
}
"""

QUERY_SLACK_CHANNELS = """
query QuerySlackChannels($properties: SlackChannelsInput!) {
  slackChannels(properties: $properties) { results }
}
"""

QUERY_SHAREPOINT_LIBRARIES = """
query QuerySharePointLibraries($properties: SharePointLibrariesInput!) {
  sharePointLibraries(properties: $properties) {
    accountName
    results { libraryName libraryId siteName siteId }
  }
}
"""

QUERY_SHAREPOINT_FOLDERS = """
query QuerySharePointFolders($properties: SharePointFoldersInput!, $libraryId: ID!) {
  sharePointFolders(properties: $properties, libraryId: $libraryId) {
    accountName
    results { folderName folderId }
  }
}
"""

QUERY_MICROSOFT_TEAMS_TEAMS = """
query QueryMicrosoftTeamsTeams($properties: MicrosoftTeamsTeamsInput!) {
  microsoftTeamsTeams(properties: $properties) { results { teamName teamId } }
}
"""

QUERY_MICROSOFT_TEAMS_CHANNELS = """
query QueryMicrosoftTeamsChannels($properties: MicrosoftTeamsChannelsInput!, $teamId: ID!) {
  microsoftTeamsChannels(properties: $properties, teamId: $teamId) { results { channelName channelId } }
}
"""

# Web and notifications

MAP_WEB = """
query MapWeb($uri: URL!, $allowedPaths: [String!], $excludedPaths: [String!]) {
  mapWeb(uri: $uri, allowedPaths: $allowedPaths, excludedPaths: $excludedPaths) { results }
}
"""

SEARCH_WEB = """
query SearchWeb($text: String!, $service: SearchServiceTypes, $limit: Int) {
  searchWeb(text: $text, service: $service, limit: $limit) { results { uri text title score } }
}
"""

SEND_NOTIFICATION = """
mutation SendNotification($connector: IntegrationConnectorInput!, $text: String!, $textType: TextTypes) {
  sendNotification(connector: $connector, text: $text, textType: $textType) { result }
}
"""
