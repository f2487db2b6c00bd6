"""Basic usage example for SchemaGulp."""

import asyncio
from pathlib import Path

from schemagulp import Config, FileDescriptor, SchemaGulp, generate_schema


async def generate_example():
    """Example of basic schema generation from in-memory uploads."""
    gulp = SchemaGulp(
        Config(project_name="corner_shop"),
        website_type="ecommerce",
        database_type="postgresql",
    )

    files = [
        FileDescriptor.from_content("products.csv", "title,price,in_stock\nWidget,9.99,true\n"),
        FileDescriptor.from_content("about.md", "# About us\n\nOpened 2024-01-15.\n"),
    ]

    result = await gulp.generate(files)

    print(f"Tables: {', '.join(t.name for t in result.tables)}")
    print(f"Total fields: {result.total_fields}")
    print(f"Fields found in files: {', '.join(result.metadata['common_fields'])}")
    print("-" * 50)
    print(result.sql)


async def export_example():
    """Example of exporting one result in every format."""
    gulp = SchemaGulp(Config(project_name="journal"), website_type="blog", include_images=True)
    result = await gulp.generate([])

    for fmt in gulp.get_supported_formats():
        filename = gulp.export_filename(result, fmt)
        print(f"{fmt}: {filename} ({len(gulp.export(result, fmt))} chars)")


def directory_example():
    """Example of generating a schema for every file in a directory."""
    data_dir = Path("examples/data")
    files = sorted(p for p in data_dir.glob("*") if p.is_file()) if data_dir.exists() else []

    if not files:
        print("No files found in examples/data/")
        return

    config = Config(website_type="documentation", database_type="sqlite")
    result = generate_schema(files, config)
    print(f"Analyzed {result.metadata['files_analyzed']} files")
    print(f"Failed: {result.metadata['failed_files'] or 'none'}")


def main():
    """Run examples."""
    print("SchemaGulp Examples")
    print("=" * 50)

    asyncio.run(generate_example())

    # Uncomment to try other examples:
    # asyncio.run(export_example())
    # directory_example()


if __name__ == "__main__":
    main()
