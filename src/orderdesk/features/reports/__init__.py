"""Reporting for orderdesk

Read-only views over clients, orders and products: name search, price
filters and statistics, order contents, date filters and the cross-table
reports of which client bought which product and how much of it.

The endpoints live under the /clients, /orders and /products prefixes next
to the CRUD routes. All report handlers delegate to service functions that
contain the actual query logic."""
