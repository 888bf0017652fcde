"""Application layer – the admission-control engine."""
