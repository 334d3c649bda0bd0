"""Images API: signed upload parameters and deletion for ImageKit-hosted images."""
