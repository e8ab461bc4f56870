#!/usr/bin/env python3
"""
Kids Learning AI Startup Script

Easy startup script with environment checking and helpful error messages.
"""
import os
import sys
import subprocess
from pathlib import Path

def check_environment():
    """Check if environment is properly configured"""
    print("🔍 Checking environment configuration...")

    # Load environment variables
    from dotenv import load_dotenv
    if Path(".env").exists():
        load_dotenv()
    else:
        print("ℹ️  No .env file found, using process environment")

    # Check required variables
    groq_key = os.getenv("GROQ_API_KEY")
    if not groq_key or groq_key.startswith("your_groq"):
        print("❌ GROQ_API_KEY not configured!")
        print("🔑 Get your API key from: https://console.groq.com/keys")
        print("📝 Set GROQ_API_KEY in the environment or in a .env file")
        return False

    print("✅ Environment configuration looks good!")
    return True

def check_dependencies():
    """Check if required dependencies are installed"""
    print("📦 Checking dependencies...")

    required_packages = [
        "fastapi",
        "uvicorn",
        "pydantic",
        "pydantic_settings",
        "dotenv",  # python-dotenv
        "groq",
        "loguru"
    ]

    missing_packages = []

    for package in required_packages:
        try:
            __import__(package)
            print(f"✅ {package}")
        except ImportError:
            missing_packages.append(package)
            print(f"❌ {package}")

    if missing_packages:
        print(f"\n⚠️  Missing packages: {', '.join(missing_packages)}")
        print("📥 Installing missing packages...")
        try:
            subprocess.run([sys.executable, "-m", "pip", "install", "-e", "."],
                         check=True)
            print("✅ Dependencies installed successfully!")
        except subprocess.CalledProcessError:
            print("❌ Failed to install dependencies")
            return False

    print("✅ All dependencies are available!")
    return True

def start_service():
    """Start the Kids Learning AI service"""
    print("🚀 Starting Kids Learning AI...")

    try:
        import uvicorn

        # Load settings
        from app.core.config import settings

        print(f"🌟 Starting {settings.app_name} v{settings.app_version}")
        print(f"🌐 Server will be available at: http://{settings.host}:{settings.port}")
        print(f"📖 API documentation: http://{settings.host}:{settings.port}/docs")
        print("\n" + "="*60)
        print("🧒 Ready to make stories, quizzes and math problems!")
        print("="*60 + "\n")

        uvicorn.run(
            "main:app",
            host=settings.host,
            port=settings.port,
            reload=settings.debug,
            access_log=True,
            log_level=settings.log_level.lower()
        )

    except Exception as e:
        print(f"❌ Failed to start service: {e}")
        print("\n🔧 Troubleshooting tips:")
        print("1. Check your .env configuration")
        print("2. Verify GROQ_API_KEY is valid")
        print("3. Check that PORT is free")
        return False

    return True

def main():
    """Main startup function"""
    print("🧒 Kids Learning AI Startup")
    print("=" * 50)

    # Check environment
    if not check_environment():
        print("\n❌ Environment check failed!")
        print("Please fix the configuration and try again.")
        sys.exit(1)

    # Check dependencies
    if not check_dependencies():
        print("\n❌ Dependency check failed!")
        print("Please install required packages and try again.")
        sys.exit(1)

    # Start service
    print("\n🎯 All checks passed! Starting service...")
    start_service()

if __name__ == "__main__":
    main()
