"""
PRESENTATION LAYER - Transport shapes

Request/response models and the mappers between them and application DTOs.
Routing lives with whichever transport embeds this package.
"""
