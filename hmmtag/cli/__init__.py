"""Front ends for hmmtag: interactive console, file test and cross-validation."""
