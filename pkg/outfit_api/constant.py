DEFAULT_GRAPHQL_URL = "https://impress-2020.openneo.net/api/graphql"
DEFAULT_TIMEOUT_SECONDS = 30.0
DEFAULT_USER_AGENT = "outfit-archiver"

# Image sizes (px) served by the API, and the field alias each is fetched under
SIZE_600 = 600
SIZE_300 = 300
SIZE_150 = 150
SUPPORTED_SIZES = (SIZE_600, SIZE_300, SIZE_150)

OUTFIT_LAYERS_QUERY = """
query OutfitImageLayers($outfitId: ID!) {
  outfit(id: $outfitId) {
    id
    petAppearance {
      id
      layers { ...ImageLayer }
    }
    itemAppearances {
      id
      layers { ...ImageLayer }
    }
  }
}

fragment ImageLayer on AppearanceLayer {
  id
  zone { id depth }
  imageUrl600: imageUrl(size: SIZE_600)
  imageUrl300: imageUrl(size: SIZE_300)
  imageUrl150: imageUrl(size: SIZE_150)
}
"""

ERROR_OUTFIT_NOT_FOUND = "outfit {outfit_id} not found"
ERROR_HTTP_STATUS = "outfit {outfit_id}: upstream returned HTTP {status}"
ERROR_TRANSPORT = "outfit {outfit_id}: request failed: {error}"
ERROR_INVALID_PAYLOAD = "outfit {outfit_id}: invalid response payload: {error}"
ERROR_UNSUPPORTED_SIZE = "size must be one of {supported}, got {value}"
