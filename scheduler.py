import sys

from apscheduler.schedulers.blocking import BlockingScheduler
from pathlib import Path
import subprocess
import logging

import config

# Configure logging
logging.basicConfig(level=config.LOG_LEVEL, format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')

BASE = Path(__file__).resolve().parent
sched = BlockingScheduler(timezone="UTC")

def run_command(command, cwd):
    """Runs a command and logs its output."""
    process = subprocess.Popen(command, cwd=cwd, stdout=subprocess.PIPE, stderr=subprocess.STDOUT, text=True)
    for line in iter(process.stdout.readline, ''):
        logging.info(line.strip())
    process.stdout.close()
    return_code = process.wait()
    if return_code:
        logging.error(f"Command '{' '.join(command)}' failed with return code {return_code}")
    return return_code

@sched.scheduled_job("cron", hour=config.SCHEDULE_CRON_HOURS)
def update_feeds():
    # The Twisted reactor cannot be restarted, so every run gets a fresh interpreter
    logging.info(f"Starting feed update for {', '.join(config.FEED_CATEGORIES)}...")
    run_command([sys.executable, "-m", "crawler.orchestrator", *config.FEED_CATEGORIES], cwd=str(BASE))
    logging.info("Feed update finished.")

if __name__ == "__main__":
    logging.info("Starting a single feed update...")
    update_feeds()
    logging.info("Single run finished.")
    if "--schedule" in sys.argv[1:]:
        logging.info("Starting scheduler...")
        sched.start()
