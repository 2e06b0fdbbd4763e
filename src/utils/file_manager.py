"""Output directory and file management utilities."""
import os


def create_output_directory(base_path: str) -> str:
    """
    Create the output directory for G-code files.

    Args:
        base_path: Directory to create

    Returns:
        The directory path
    """
    os.makedirs(base_path, exist_ok=True)
    return base_path


def write_program_file(directory: str, content: str, filename: str = 'wasteboard.nc') -> str:
    """
    Write a G-code program file.

    The file always ends with a newline.

    Args:
        directory: Output directory
        content: Program text
        filename: File name inside the directory

    Returns:
        Full path to the written file
    """
    file_path = os.path.join(directory, filename)
    with open(file_path, 'w') as f:
        f.write(content)
        if not content.endswith('\n'):
            f.write('\n')
    return file_path
