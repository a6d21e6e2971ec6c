# main.py
import argparse
import asyncio
import logging
from catalog_tree.config import setup_logging
from catalog_tree.models.query import CategoryQuery, SortDirection, SortField, StatusFilter
from catalog_tree.services import CatalogClient, CategoryService
from catalog_tree.utils.formatters import format_tree_lines

def parse_args():
    parser = argparse.ArgumentParser(description="Load and print the category tree")
    parser.add_argument("--search", default=None)
    parser.add_argument("--status", choices=[s.value for s in StatusFilter], default=StatusFilter.ALL.value)
    parser.add_argument("--sort-by", choices=[f.value for f in SortField], default=None)
    parser.add_argument("--direction", choices=[d.value for d in SortDirection], default=SortDirection.ASC.value)
    return parser.parse_args()

async def main():
    # Setup logging
    setup_logging()
    logger = logging.getLogger(__name__)
    args = parse_args()

    query = CategoryQuery(
        search=args.search,
        status=StatusFilter(args.status),
        sort_by=SortField(args.sort_by) if args.sort_by else None,
        sort_direction=SortDirection(args.direction)
    )

    try:
        service = CategoryService(CatalogClient())
        snapshot = await service.refresh(query)
    except Exception as e:
        logger.error(f"Error loading categories: {e}", exc_info=True)
        raise

    stats = snapshot.statistics
    logger.info(
        f"{stats.total_categories} categories "
        f"({stats.active_categories} active, {stats.root_categories} root)"
    )
    for line in format_tree_lines(snapshot.tree, snapshot.expansion):
        print(line)

if __name__ == "__main__":
    asyncio.run(main())
