"""Shop service: member registration, lookup and update over a relational store."""
